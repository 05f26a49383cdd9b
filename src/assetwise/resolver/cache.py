"""In-memory resolver cache mapping schema and object-type names to IDs."""

from __future__ import annotations

from collections.abc import Iterable

from assetwise.model import OBJECT_TYPE, SCHEMA, EntityInfo, ResolverSnapshot
from assetwise.resolver.locks import ReadWriteLock
from assetwise.types import EntityCategory


def name_key(name: str, *, schema_name: str | None = None) -> str:
    """Return the lookup key used in the by-name tables."""
    if schema_name:
        return f"{schema_name.lower()}/{name.lower()}"
    return name.lower()


class ResolverCache:
    """Four paired lookup tables: schemas and object types, each by ID and by name.

    Every entry in a by-ID table has a by-name entry holding the same
    ``EntityInfo``. Object types recorded with a schema name are keyed both
    as ``"<schema>/<type>"`` and by bare type name. The cache only grows
    until ``clear`` is called.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._schemas_by_id: dict[str, EntityInfo] = {}
        self._schemas_by_name: dict[str, EntityInfo] = {}
        self._types_by_id: dict[str, EntityInfo] = {}
        self._types_by_name: dict[str, EntityInfo] = {}

    def resolve(self, category: EntityCategory, token: str) -> EntityInfo | None:
        """Look up ``token`` as an ID first, then as a case-insensitive name."""
        with self._lock.read():
            by_id, by_name = self._tables(category)
            entity = by_id.get(token)
            if entity is not None:
                return entity
            return by_name.get(token.lower())

    def record(self, category: EntityCategory, entity: EntityInfo, *, schema_name: str | None = None) -> None:
        """Insert ``entity`` into both paired tables as one update."""
        self.record_many(category, (entity,), schema_name=schema_name)

    def record_many(
        self,
        category: EntityCategory,
        entities: Iterable[EntityInfo],
        *,
        schema_name: str | None = None,
    ) -> int:
        """Insert several entities of one category under a single write lock."""
        if category != SCHEMA and category != OBJECT_TYPE:
            raise ValueError(f"unknown entity category: {category!r}")
        pending = list(entities)
        for entity in pending:
            if entity.category != category:
                raise ValueError(f"entity {entity.id} is a {entity.category}, not a {category}")

        with self._lock.write():
            by_id, by_name = self._tables(category)
            for entity in pending:
                by_id[entity.id] = entity
                by_name[name_key(entity.name)] = entity
                if category == OBJECT_TYPE and schema_name:
                    by_name[name_key(entity.name, schema_name=schema_name)] = entity
        return len(pending)

    def entities(self, category: EntityCategory) -> list[EntityInfo]:
        with self._lock.read():
            by_id, _ = self._tables(category)
            return list(by_id.values())

    def counts(self) -> dict[str, int]:
        with self._lock.read():
            return {
                "schemas": len(self._schemas_by_id),
                "object_types": len(self._types_by_id),
            }

    def snapshot(self) -> ResolverSnapshot:
        """Return a full copy of all four tables; later mutations do not leak into it."""
        with self._lock.read():
            return ResolverSnapshot(
                schemas_by_id=dict(self._schemas_by_id),
                schemas_by_name=dict(self._schemas_by_name),
                types_by_id=dict(self._types_by_id),
                types_by_name=dict(self._types_by_name),
            )

    def restore(self, snapshot: ResolverSnapshot) -> None:
        """Replace all tables with copies of ``snapshot``."""
        copied = snapshot.copy()
        with self._lock.write():
            self._schemas_by_id = copied.schemas_by_id
            self._schemas_by_name = copied.schemas_by_name
            self._types_by_id = copied.types_by_id
            self._types_by_name = copied.types_by_name

    def clear(self) -> None:
        with self._lock.write():
            self._schemas_by_id = {}
            self._schemas_by_name = {}
            self._types_by_id = {}
            self._types_by_name = {}

    def _tables(self, category: EntityCategory) -> tuple[dict[str, EntityInfo], dict[str, EntityInfo]]:
        if category == SCHEMA:
            return self._schemas_by_id, self._schemas_by_name
        if category == OBJECT_TYPE:
            return self._types_by_id, self._types_by_name
        raise ValueError(f"unknown entity category: {category!r}")
