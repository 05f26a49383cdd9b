"""Configuration-related exceptions."""

from __future__ import annotations

from assetwise.exceptions.base import AssetwiseError


class ConfigError(AssetwiseError, ValueError):
    """Raised when configuration is invalid."""
