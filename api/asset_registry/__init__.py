"""Application package for the asset registry service."""
