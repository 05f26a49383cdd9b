"""Root exception type."""

from __future__ import annotations


class AssetwiseError(Exception):
    """Base class for all errors raised by Assetwise."""
