"""Configuration defaults, filenames and environment variable names."""

from __future__ import annotations

from assetwise.constants.cache import DEFAULT_CACHE_TTL_HOURS

CONFIG_FILENAME: str = "assetwise.yaml"
DEFAULT_CACHE_DIR: str = ".cache/assetwise"
DEFAULT_TTL_HOURS: int = DEFAULT_CACHE_TTL_HOURS

ENV_CACHE_DIR: str = "ASSETWISE_CACHE_DIR"
ENV_CACHE_TTL_HOURS: str = "ASSETWISE_CACHE_TTL_HOURS"
ENV_WORKSPACE_ID: str = "ASSETWISE_WORKSPACE_ID"
ENV_SITE_URL: str = "ASSETWISE_SITE_URL"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "cache_dir",
        "cache_ttl_hours",
        "workspace_id",
        "site_url",
    }
)
