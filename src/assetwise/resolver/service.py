"""Cache-backed name/ID resolution for schemas and object types."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from assetwise.constants.cache import DEFAULT_MEMORY_TTL_SECONDS
from assetwise.exceptions import CacheMissError, CacheWriteError, EntityNotFoundError
from assetwise.model import OBJECT_TYPE, SCHEMA, EntityInfo
from assetwise.resolver.cache import ResolverCache, name_key
from assetwise.resolver.disk import DiskCache
from assetwise.types import CatalogSource, LoggerLike


class Resolver:
    """Translates schema and object-type names to IDs, and back.

    Lookups are served from an in-memory ``ResolverCache``. When that cache is
    older than ``memory_ttl_seconds`` it is refreshed, first from the disk
    cache and, on any cache miss, from the remote catalog.
    """

    def __init__(
        self,
        source: CatalogSource,
        *,
        workspace_id: str,
        site_url: str,
        disk_cache: DiskCache | None = None,
        memory_ttl_seconds: float = DEFAULT_MEMORY_TTL_SECONDS,
        logger: LoggerLike | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.source = source
        self.workspace_id = workspace_id
        self.site_url = site_url
        self.disk_cache = disk_cache
        self.cache = ResolverCache()
        self.memory_ttl_seconds = memory_ttl_seconds
        self._log: LoggerLike = logger if logger is not None else logging.getLogger(__name__)
        self._clock = clock
        self._last_refresh: float | None = None

    def refresh(self) -> str:
        """Repopulate the in-memory cache and return where the data came from."""
        if self.disk_cache is not None:
            try:
                entry = self.disk_cache.load(self.workspace_id, self.site_url)
            except CacheMissError as exc:
                self._log.debug("Disk cache miss for workspace %s: %s", self.workspace_id, exc)
            else:
                self.cache.restore(entry.snapshot())
                self._last_refresh = self._clock()
                return "disk"

        self._load_from_source()
        self._last_refresh = self._clock()

        if self.disk_cache is not None:
            try:
                self.disk_cache.save(self.workspace_id, self.site_url, self.cache)
            except CacheWriteError as exc:
                self._log.warning("failed to save cache to disk: %s", exc)
        return "remote"

    def needs_refresh(self) -> bool:
        if self._last_refresh is None:
            return True
        return self._clock() - self._last_refresh > self.memory_ttl_seconds

    def resolve_schema_id(self, name_or_id: str) -> str:
        return self._schema(name_or_id).id

    def resolve_schema_name(self, schema_id: str) -> str:
        self._ensure_fresh()
        entity = self.cache.resolve(SCHEMA, schema_id)
        if entity is None or entity.id != schema_id:
            raise EntityNotFoundError(f"schema ID not found: {schema_id}")
        return entity.name

    def resolve_object_type_id(self, schema_name_or_id: str, type_name_or_id: str) -> str:
        schema = self._schema(schema_name_or_id)
        entity = self.cache.resolve(OBJECT_TYPE, type_name_or_id)
        if entity is not None and entity.id == type_name_or_id and entity.parent_id == schema.id:
            return entity.id
        entity = self.cache.resolve(OBJECT_TYPE, name_key(type_name_or_id, schema_name=schema.name))
        if entity is not None:
            return entity.id
        raise EntityNotFoundError(f"object type not found: {type_name_or_id} in schema {schema.name}")

    def resolve_object_type_name(self, type_id: str) -> tuple[str, str]:
        """Return ``(object type name, schema name)`` for an object type ID."""
        self._ensure_fresh()
        entity = self.cache.resolve(OBJECT_TYPE, type_id)
        if entity is None or entity.id != type_id:
            raise EntityNotFoundError(f"object type ID not found: {type_id}")
        schema_name = ""
        if entity.parent_id:
            schema = self.cache.resolve(SCHEMA, entity.parent_id)
            if schema is not None:
                schema_name = schema.name
        return entity.name, schema_name

    def list_schemas(self) -> list[EntityInfo]:
        self._ensure_fresh()
        return self.cache.entities(SCHEMA)

    def list_object_types(self, schema_name_or_id: str) -> list[EntityInfo]:
        schema = self._schema(schema_name_or_id)
        return [entity for entity in self.cache.entities(OBJECT_TYPE) if entity.parent_id == schema.id]

    def stats(self) -> dict[str, Any]:
        counts = self.cache.counts()
        return {
            **counts,
            "ttl_seconds": self.memory_ttl_seconds,
            "needs_refresh": self.needs_refresh(),
        }

    def _schema(self, name_or_id: str) -> EntityInfo:
        self._ensure_fresh()
        entity = self.cache.resolve(SCHEMA, name_or_id)
        if entity is None:
            raise EntityNotFoundError(f"schema not found: {name_or_id}")
        return entity

    def _ensure_fresh(self) -> None:
        if self.needs_refresh():
            self.refresh()

    def _load_from_source(self) -> None:
        fresh = ResolverCache()
        schemas = [_entity(record, SCHEMA) for record in self.source.list_schemas()]
        fresh.record_many(SCHEMA, schemas)
        self._log.info("Loading object types for %d schemas...", len(schemas))

        for schema in schemas:
            try:
                records = self.source.list_object_types(schema.id)
                types = [_entity(record, OBJECT_TYPE, parent_id=schema.id) for record in records]
            except (LookupError, ValueError, OSError) as exc:
                self._log.error("failed to load object types for schema %s: %s", schema.id, exc)
                continue
            fresh.record_many(OBJECT_TYPE, types, schema_name=schema.name)

        self.cache.restore(fresh.snapshot())


def _entity(record: Mapping[str, Any], category: str, *, parent_id: str | None = None) -> EntityInfo:
    entity_id = record.get("id")
    name = record.get("name")
    if entity_id is None or not isinstance(name, str):
        raise ValueError(f"{category} record must carry an id and a name: {dict(record)!r}")
    return EntityInfo(id=str(entity_id), name=name, category=category, parent_id=parent_id)  # type: ignore[arg-type]
