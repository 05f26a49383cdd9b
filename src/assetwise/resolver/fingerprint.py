"""Cache key derivation for per-workspace resolver cache files."""

from __future__ import annotations

import hashlib

from assetwise.constants.cache import CACHE_FILE_PREFIX, CACHE_FILE_SUFFIX, CACHE_KEY_SEPARATOR


def workspace_fingerprint(workspace_id: str, site_url: str) -> str:
    """Return a stable SHA-256 fingerprint for a workspace on a site."""
    blob = f"{workspace_id}{CACHE_KEY_SEPARATOR}{site_url}".encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def cache_file_name(workspace_id: str, site_url: str) -> str:
    """Return the cache file name, never derived from human-readable names."""
    return f"{CACHE_FILE_PREFIX}{workspace_fingerprint(workspace_id, site_url)}{CACHE_FILE_SUFFIX}"
