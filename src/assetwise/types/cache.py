"""Typed cache payload structures persisted to disk."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class EntityPayload(TypedDict):
    """Serialized ``EntityInfo``."""

    id: str
    name: str
    category: str
    parent_id: NotRequired[str]


class PersistentCachePayload(TypedDict):
    """Top-level resolver cache payload, one file per workspace."""

    workspace_id: str
    site_url: str
    schemas: dict[str, EntityPayload]
    schemas_by_name: dict[str, EntityPayload]
    object_types: dict[str, EntityPayload]
    types_by_name: dict[str, EntityPayload]
    cached_at: str
    expires_at: str
    version: int
