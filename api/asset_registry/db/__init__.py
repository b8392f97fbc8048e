"""Database utilities."""
