"""
Custom exceptions for Cadenza.
"""


class CadenzaError(Exception):
    """Base exception for Cadenza."""
    pass


class LibraryError(CadenzaError):
    """Exception raised when a library operation is misused."""
    pass


class InvalidSongError(LibraryError, ValueError):
    """Exception raised when a missing or malformed song is passed to the library."""
    pass


class InvalidAlbumError(LibraryError, ValueError):
    """Exception raised when a missing or malformed album is passed to the library."""
    pass


class StorageError(CadenzaError, OSError):
    """Exception raised when persisting data to disk fails."""
    pass


class ConfigurationError(CadenzaError):
    """Exception raised when configuration is invalid."""
    pass
