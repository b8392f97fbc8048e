"""Service-layer exceptions."""


class AssetRegistryError(Exception):
    """Base exception for asset registry service errors."""
    pass


class AssetNotFoundError(AssetRegistryError):
    """Asset not found."""
    pass


class DuplicateAssetIdError(AssetRegistryError):
    """Asset id is already taken."""
    pass


class DuplicateNameError(AssetRegistryError):
    """Catalog entry with the same name exists."""
    pass


class PermissionDeniedError(AssetRegistryError):
    """Caller's role does not allow the operation."""
    pass


class UserNotFoundError(AssetRegistryError):
    """User not found."""
    pass


class EmptyExportError(AssetRegistryError):
    """Nothing to export."""
    pass
