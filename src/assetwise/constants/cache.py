"""Constants used by the resolver disk cache."""

from __future__ import annotations

CACHE_VERSION: int = 1
CACHE_SUBDIR: str = "resolver"
CACHE_FILE_PREFIX: str = "workspace_"
CACHE_FILE_SUFFIX: str = ".json"
CACHE_TEMP_PREFIX: str = ".cache-"
CACHE_TEMP_SUFFIX: str = ".tmp"

# Separates workspace ID and site URL inside the fingerprint input.
CACHE_KEY_SEPARATOR: str = "|"

DEFAULT_CACHE_TTL_HOURS: int = 24
DEFAULT_MEMORY_TTL_SECONDS: int = 300
