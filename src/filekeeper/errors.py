"""Exception types raised by filekeeper."""

from __future__ import annotations


class FileKeeperError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(FileKeeperError):
    """Raised when the storage namespace has not been configured."""


class InvalidPathError(FileKeeperError, ValueError):
    """Raised when a relative path would leave the namespace root."""


class EncodingError(FileKeeperError, ValueError):
    """Raised when a value cannot be serialised to bytes."""


class DecodingError(FileKeeperError, ValueError):
    """Raised when stored bytes do not match the expected shape."""
