"""Shared exception hierarchy for Assetwise."""

from __future__ import annotations

from .base import AssetwiseError
from .cache import (
    CacheCorruptError,
    CacheExpiredError,
    CacheMismatchError,
    CacheMissError,
    CacheNotFoundError,
    CacheWriteError,
)
from .config import ConfigError
from .resolution import EntityNotFoundError, MetadataFetchError

__all__ = [
    "AssetwiseError",
    "CacheCorruptError",
    "CacheExpiredError",
    "CacheMismatchError",
    "CacheMissError",
    "CacheNotFoundError",
    "CacheWriteError",
    "ConfigError",
    "EntityNotFoundError",
    "MetadataFetchError",
]
