class ArtworkError(Exception):
    """Base exception for artwork batch setup errors."""


class ArtworkNotFoundError(ArtworkError):
    """Raised when no artwork file was supplied or discovered."""


class TargetDirectoryError(ArtworkError):
    """Raised when the target path is not a directory."""
