"""Configuration loading for Assetwise."""

from .loader import load_config
from .model import AssetwiseConfig

__all__ = ["AssetwiseConfig", "load_config"]
