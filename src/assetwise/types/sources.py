"""Protocols for the remote collaborators consumed by the core."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from assetwise.model import PropertyError, PropertyValue


class MetadataSource(Protocol):
    """Returns raw attribute records for an object type."""

    def get_object_type_attributes(self, object_type_id: str) -> list[Mapping[str, Any]]: ...


class CatalogSource(Protocol):
    """Lists schemas and the object types inside a schema."""

    def list_schemas(self) -> list[Mapping[str, Any]]: ...

    def list_object_types(self, schema_id: str) -> list[Mapping[str, Any]]: ...


class PropertyResolution(Protocol):
    """Resolves raw property maps into typed values plus per-property errors."""

    def resolve(
        self,
        object_type_id: str,
        properties: Mapping[str, Any],
    ) -> tuple[list[PropertyValue], list[PropertyError]]: ...
