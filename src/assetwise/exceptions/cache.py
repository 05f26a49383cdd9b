"""Disk cache exceptions.

``CacheMissError`` and its subclasses are non-fatal: callers treat them as a
signal to fetch live data and repopulate the cache. ``CacheWriteError`` is
raised for filesystem failures and is fatal to the calling operation.
"""

from __future__ import annotations

from pathlib import Path

from assetwise.exceptions.base import AssetwiseError


class CacheMissError(AssetwiseError):
    """Raised when a cache entry cannot be served."""


class CacheNotFoundError(CacheMissError):
    """Raised when no cache file exists for a workspace."""


class CacheExpiredError(CacheMissError):
    """Raised when a cache file exists but is past its expiry time."""


class CacheCorruptError(CacheMissError):
    """Raised when a cache file cannot be read or deserialized."""


class CacheMismatchError(CacheMissError):
    """Raised when a cache file belongs to a different workspace."""


class CacheWriteError(AssetwiseError):
    """Raised when a cache filesystem operation fails."""

    def __init__(self, operation: str, path: Path, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.path = path
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to {operation} {path}{detail}")
