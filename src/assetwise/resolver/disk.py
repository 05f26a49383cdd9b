"""Durable, TTL-bounded persistence of resolver caches, one file per workspace."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from typing import TypeAlias
from datetime import UTC, datetime, timedelta
from pathlib import Path

from assetwise.constants.cache import (
    CACHE_FILE_PREFIX,
    CACHE_FILE_SUFFIX,
    CACHE_SUBDIR,
    CACHE_TEMP_PREFIX,
    CACHE_TEMP_SUFFIX,
    CACHE_VERSION,
)
from assetwise.exceptions import (
    CacheCorruptError,
    CacheExpiredError,
    CacheMismatchError,
    CacheNotFoundError,
    CacheWriteError,
)
from assetwise.io import load_json_file, write_json_atomic
from assetwise.model import CacheInfo, PersistentCacheEntry, ResolverSnapshot
from assetwise.resolver.cache import ResolverCache
from assetwise.resolver.fingerprint import cache_file_name
from assetwise.types import LoggerLike


Clock: TypeAlias = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class DiskCache:
    """Stores resolver snapshots under ``<base_dir>/resolver``.

    Missing, expired, corrupt and mismatched files surface as
    ``CacheMissError`` subclasses so callers can fall back to a live fetch.
    Filesystem failures while saving, listing or clearing raise
    ``CacheWriteError``.
    """

    def __init__(
        self,
        base_dir: Path,
        ttl_hours: float,
        *,
        logger: LoggerLike | None = None,
        clock: Clock | None = None,
    ) -> None:
        if ttl_hours < 0:
            raise ValueError("ttl_hours must not be negative")
        self.cache_dir = Path(base_dir) / CACHE_SUBDIR
        self.ttl = timedelta(hours=ttl_hours)
        self._log: LoggerLike = logger if logger is not None else logging.getLogger(__name__)
        self._clock: Clock = clock or utc_now
        self._ensure_dir()

    def path_for(self, workspace_id: str, site_url: str) -> Path:
        return self.cache_dir / cache_file_name(workspace_id, site_url)

    def load(self, workspace_id: str, site_url: str) -> PersistentCacheEntry:
        """Load the cache entry for a workspace.

        Raises:
            CacheNotFoundError: no file exists for the workspace.
            CacheCorruptError: the file cannot be read or parsed.
            CacheExpiredError: the entry is past ``expires_at``.
            CacheMismatchError: the stored workspace ID differs.
        """
        path = self.path_for(workspace_id, site_url)
        if not path.is_file():
            raise CacheNotFoundError(f"cache file not found: {path.name}")

        entry = self._read_entry(path)
        if entry.is_expired(self._clock()):
            raise CacheExpiredError(f"cache has expired at {entry.expires_at.isoformat()}")
        if entry.workspace_id != workspace_id:
            raise CacheMismatchError(
                f"workspace ID mismatch in cache: expected {workspace_id!r}, found {entry.workspace_id!r}"
            )
        return entry

    def save(
        self,
        workspace_id: str,
        site_url: str,
        cache: ResolverCache | ResolverSnapshot,
    ) -> PersistentCacheEntry:
        """Snapshot ``cache`` and atomically write it for the workspace."""
        snapshot = cache.snapshot() if isinstance(cache, ResolverCache) else cache.copy()
        cached_at = self._clock()
        entry = PersistentCacheEntry(
            workspace_id=workspace_id,
            site_url=site_url,
            schemas=snapshot.schemas_by_id,
            schemas_by_name=snapshot.schemas_by_name,
            object_types=snapshot.types_by_id,
            types_by_name=snapshot.types_by_name,
            cached_at=cached_at,
            expires_at=cached_at + self.ttl,
            version=CACHE_VERSION,
        )
        path = self.path_for(workspace_id, site_url)
        self._ensure_dir()
        try:
            write_json_atomic(
                path=path,
                payload=entry.to_payload(),
                temp_prefix=CACHE_TEMP_PREFIX,
                temp_suffix=CACHE_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise CacheWriteError("write cache file", path, exc) from exc
        self._log.debug("Saved resolver cache for workspace %s to %s", workspace_id, path.name)
        return entry

    def list_cached_workspaces(self) -> list[CacheInfo]:
        """Summarize every readable cache file; unreadable files are logged and skipped."""
        if not self.cache_dir.is_dir():
            return []
        try:
            paths = sorted(self.cache_dir.glob(f"{CACHE_FILE_PREFIX}*{CACHE_FILE_SUFFIX}"))
        except OSError as exc:
            raise CacheWriteError("read cache directory", self.cache_dir, exc) from exc

        infos: list[CacheInfo] = []
        now = self._clock()
        for path in paths:
            if not path.is_file():
                continue
            try:
                infos.append(self._cache_info(path, now))
            except (CacheCorruptError, CacheNotFoundError, OSError) as exc:
                self._log.warning("failed to read cache info for %s: %s", path.name, exc)
        return infos

    def clear_expired(self) -> int:
        """Remove expired cache files and return how many were removed."""
        removed = 0
        for info in self.list_cached_workspaces():
            if not info.is_expired:
                continue
            path = self.cache_dir / info.file_name
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                self._log.warning("failed to remove expired cache file %s: %s", info.file_name, exc)
                continue
            removed += 1
        if removed:
            self._log.info("Removed %d expired cache files", removed)
        return removed

    def clear_all(self) -> None:
        """Remove the whole cache directory."""
        if not self.cache_dir.exists():
            return
        try:
            shutil.rmtree(self.cache_dir)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise CacheWriteError("remove cache directory", self.cache_dir, exc) from exc

    def evict(self, workspace_id: str, site_url: str) -> bool:
        """Remove one workspace's cache file, returning whether a file was removed."""
        path = self.path_for(workspace_id, site_url)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise CacheWriteError("remove cache file", path, exc) from exc
        return True

    def _ensure_dir(self) -> None:
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheWriteError("create cache directory", self.cache_dir, exc) from exc

    def _read_entry(self, path: Path) -> PersistentCacheEntry:
        try:
            payload = load_json_file(path)
        except FileNotFoundError as exc:
            raise CacheNotFoundError(f"cache file not found: {path.name}") from exc
        except (OSError, ValueError) as exc:
            raise CacheCorruptError(f"failed to read cache file {path.name}: {exc}") from exc
        try:
            entry = PersistentCacheEntry.from_payload(payload)
        except ValueError as exc:
            raise CacheCorruptError(f"failed to parse cache file {path.name}: {exc}") from exc
        if entry.version != CACHE_VERSION:
            raise CacheCorruptError(f"unsupported cache version {entry.version} in {path.name}")
        return entry

    def _cache_info(self, path: Path, now: datetime) -> CacheInfo:
        entry = self._read_entry(path)
        size_bytes = path.stat().st_size
        return CacheInfo(
            workspace_id=entry.workspace_id,
            site_url=entry.site_url,
            schema_count=len(entry.schemas),
            object_type_count=len(entry.object_types),
            cached_at=entry.cached_at,
            expires_at=entry.expires_at,
            is_expired=entry.is_expired(now),
            size_bytes=size_bytes,
            file_name=path.name,
        )
