"""Config loading from ``assetwise.yaml`` and environment overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from assetwise.config.model import AssetwiseConfig
from assetwise.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CACHE_DIR,
    DEFAULT_TTL_HOURS,
    ENV_CACHE_DIR,
    ENV_CACHE_TTL_HOURS,
    ENV_SITE_URL,
    ENV_WORKSPACE_ID,
)
from assetwise.exceptions import ConfigError


def load_config(
    root: Path,
    config_path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> AssetwiseConfig:
    """Load config from ``assetwise.yaml`` (or an explicit path), then apply env overrides."""
    root = root.resolve()
    environ = os.environ if env is None else env
    raw = _read_yaml(root, config_path)

    unknown = sorted(set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    cache_dir_raw = environ.get(ENV_CACHE_DIR) or raw.get("cache_dir", DEFAULT_CACHE_DIR)
    if not isinstance(cache_dir_raw, str) or not cache_dir_raw.strip():
        raise ConfigError("cache_dir must be a non-empty string")
    cache_dir = Path(cache_dir_raw).expanduser()
    if not cache_dir.is_absolute():
        cache_dir = root / cache_dir

    ttl_env = environ.get(ENV_CACHE_TTL_HOURS)
    if ttl_env:
        try:
            ttl_raw: Any = int(ttl_env)
        except ValueError as exc:
            raise ConfigError(f"{ENV_CACHE_TTL_HOURS} must be a positive integer, got {ttl_env!r}") from exc
    else:
        ttl_raw = raw.get("cache_ttl_hours", DEFAULT_TTL_HOURS)
    if isinstance(ttl_raw, bool) or not isinstance(ttl_raw, int) or ttl_raw <= 0:
        raise ConfigError("cache_ttl_hours must be a positive integer")

    workspace_id = environ.get(ENV_WORKSPACE_ID) or raw.get("workspace_id", "")
    if not isinstance(workspace_id, str):
        raise ConfigError("workspace_id must be a string")

    site_url = environ.get(ENV_SITE_URL) or raw.get("site_url", "")
    if not isinstance(site_url, str):
        raise ConfigError("site_url must be a string")

    return AssetwiseConfig(
        cache_dir=cache_dir,
        cache_ttl_hours=ttl_raw,
        workspace_id=workspace_id,
        site_url=site_url.rstrip("/"),
    )


def _read_yaml(root: Path, config_path: Path | None) -> dict[str, Any]:
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw
