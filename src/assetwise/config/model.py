"""Config data model for Assetwise."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from assetwise.constants.config import DEFAULT_CACHE_DIR, DEFAULT_TTL_HOURS


@dataclass(frozen=True)
class AssetwiseConfig:
    """Resolved runtime configuration."""

    cache_dir: Path = Path(DEFAULT_CACHE_DIR)
    cache_ttl_hours: int = DEFAULT_TTL_HOURS
    workspace_id: str = ""
    site_url: str = ""

    @property
    def has_workspace(self) -> bool:
        """Whether a workspace identity is configured for resolver caching."""
        return bool(self.workspace_id and self.site_url)
