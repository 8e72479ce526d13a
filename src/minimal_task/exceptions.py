"""Exceptions raised by Minimal Task."""


class MinimalTaskError(Exception):
    """Base exception for Minimal Task operations."""
    pass


class ConfigError(MinimalTaskError):
    """Configuration file could not be read or is invalid."""
    pass


class DocumentNotFoundError(MinimalTaskError):
    """A named document does not exist in the vault."""
    pass


class DocumentReadError(MinimalTaskError):
    """A document exists but could not be read or decoded."""
    pass


class DocumentWriteError(MinimalTaskError):
    """Writing a document back to disk failed."""
    pass
