"""Exceptions raised while resolving entities and attribute metadata."""

from __future__ import annotations

from assetwise.exceptions.base import AssetwiseError


class MetadataFetchError(AssetwiseError):
    """Raised when attribute metadata for an object type cannot be retrieved."""

    def __init__(self, object_type_id: str, reason: str) -> None:
        self.object_type_id = object_type_id
        super().__init__(f"failed to get object type metadata for {object_type_id}: {reason}")


class EntityNotFoundError(AssetwiseError, LookupError):
    """Raised when a schema or object type cannot be resolved."""
