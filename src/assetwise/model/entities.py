"""Core data models for Assetwise."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from assetwise.types import EntityCategory, EntityPayload, JsonObject, PersistentCachePayload

SCHEMA: EntityCategory = "schema"
OBJECT_TYPE: EntityCategory = "object_type"
ENTITY_CATEGORIES: tuple[EntityCategory, ...] = (SCHEMA, OBJECT_TYPE)


@dataclass(frozen=True)
class EntityInfo:
    """Identity record for a resolved schema or object type."""

    id: str
    name: str
    category: EntityCategory
    parent_id: str | None = None

    def to_payload(self) -> EntityPayload:
        payload: EntityPayload = {"id": self.id, "name": self.name, "category": self.category}
        if self.parent_id is not None:
            payload["parent_id"] = self.parent_id
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> EntityInfo:
        """Build an entity from its serialized form, raising ``ValueError`` on bad shape."""
        entity_id = payload.get("id")
        name = payload.get("name")
        category = payload.get("category")
        parent_id = payload.get("parent_id")
        if not isinstance(entity_id, str) or not entity_id:
            raise ValueError("entity id must be a non-empty string")
        if not isinstance(name, str):
            raise ValueError(f"entity {entity_id} name must be a string")
        if category not in ENTITY_CATEGORIES:
            raise ValueError(f"entity {entity_id} has unknown category {category!r}")
        if parent_id is not None and not isinstance(parent_id, str):
            raise ValueError(f"entity {entity_id} parent_id must be a string")
        return cls(id=entity_id, name=name, category=category, parent_id=parent_id)


@dataclass(frozen=True)
class ResolverSnapshot:
    """Point-in-time copy of the four resolver lookup tables."""

    schemas_by_id: dict[str, EntityInfo] = field(default_factory=dict)
    schemas_by_name: dict[str, EntityInfo] = field(default_factory=dict)
    types_by_id: dict[str, EntityInfo] = field(default_factory=dict)
    types_by_name: dict[str, EntityInfo] = field(default_factory=dict)

    def copy(self) -> ResolverSnapshot:
        return ResolverSnapshot(
            schemas_by_id=dict(self.schemas_by_id),
            schemas_by_name=dict(self.schemas_by_name),
            types_by_id=dict(self.types_by_id),
            types_by_name=dict(self.types_by_name),
        )


@dataclass(frozen=True)
class PersistentCacheEntry:
    """Durable snapshot of a resolver cache plus provenance."""

    workspace_id: str
    site_url: str
    schemas: dict[str, EntityInfo]
    schemas_by_name: dict[str, EntityInfo]
    object_types: dict[str, EntityInfo]
    types_by_name: dict[str, EntityInfo]
    cached_at: datetime
    expires_at: datetime
    version: int

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def snapshot(self) -> ResolverSnapshot:
        return ResolverSnapshot(
            schemas_by_id=dict(self.schemas),
            schemas_by_name=dict(self.schemas_by_name),
            types_by_id=dict(self.object_types),
            types_by_name=dict(self.types_by_name),
        )

    def to_payload(self) -> PersistentCachePayload:
        return {
            "workspace_id": self.workspace_id,
            "site_url": self.site_url,
            "schemas": _entities_to_payload(self.schemas),
            "schemas_by_name": _entities_to_payload(self.schemas_by_name),
            "object_types": _entities_to_payload(self.object_types),
            "types_by_name": _entities_to_payload(self.types_by_name),
            "cached_at": self.cached_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "version": self.version,
        }

    @classmethod
    def from_payload(cls, payload: object) -> PersistentCacheEntry:
        """Parse a decoded JSON payload, raising ``ValueError`` when malformed."""
        if not isinstance(payload, dict):
            raise ValueError("cache payload must be a JSON object")
        workspace_id = payload.get("workspace_id")
        site_url = payload.get("site_url")
        version = payload.get("version")
        if not isinstance(workspace_id, str):
            raise ValueError("workspace_id must be a string")
        if not isinstance(site_url, str):
            raise ValueError("site_url must be a string")
        if isinstance(version, bool) or not isinstance(version, int):
            raise ValueError("version must be an integer")
        return cls(
            workspace_id=workspace_id,
            site_url=site_url,
            schemas=_entities_from_payload(payload.get("schemas"), "schemas"),
            schemas_by_name=_entities_from_payload(payload.get("schemas_by_name"), "schemas_by_name"),
            object_types=_entities_from_payload(payload.get("object_types"), "object_types"),
            types_by_name=_entities_from_payload(payload.get("types_by_name"), "types_by_name"),
            cached_at=_parse_timestamp(payload.get("cached_at"), "cached_at"),
            expires_at=_parse_timestamp(payload.get("expires_at"), "expires_at"),
            version=version,
        )


@dataclass(frozen=True)
class CacheInfo:
    """Read-only summary of one cache file."""

    workspace_id: str
    site_url: str
    schema_count: int
    object_type_count: int
    cached_at: datetime
    expires_at: datetime
    is_expired: bool
    size_bytes: int
    file_name: str

    def to_dict(self) -> JsonObject:
        return {
            "workspace_id": self.workspace_id,
            "site_url": self.site_url,
            "schema_count": self.schema_count,
            "object_type_count": self.object_type_count,
            "cached_at": self.cached_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "is_expired": self.is_expired,
            "size_bytes": self.size_bytes,
            "file_name": self.file_name,
        }


@dataclass(frozen=True)
class AttributeMetadata:
    """Descriptor for a single attribute of an object type."""

    id: str
    name: str
    data_type: str = ""
    required: bool = False
    editable: bool = True
    system: bool = False
    select_options: tuple[str, ...] = ()
    status_values: tuple[str, ...] = ()
    reference_object_type: str | None = None
    description: str = ""


@dataclass(frozen=True)
class PropertyValue:
    """A resolved property value ready for submission to the remote API."""

    attribute_id: str
    field: str
    value: Any
    data_type: str

    def to_dict(self) -> JsonObject:
        return {
            "attribute_id": self.attribute_id,
            "field": self.field,
            "value": self.value,
            "data_type": self.data_type,
        }


@dataclass(frozen=True)
class PropertyError:
    """A per-property resolution failure.

    ``kind`` tags the failure for classification; ``message`` carries the
    human-readable text, which is also matched when ``kind`` is absent.
    """

    field: str
    message: str
    kind: str | None = None
    allowed: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationIssue:
    """A validation error that blocks object creation or update."""

    field: str
    message: str
    code: str
    severity: str = "error"
    suggestion: str = ""

    def to_dict(self) -> JsonObject:
        return {
            "field": self.field,
            "message": self.message,
            "code": self.code,
            "severity": self.severity,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class ValidationWarning:
    """A non-blocking validation finding."""

    field: str
    message: str
    code: str
    suggestion: str = ""

    def to_dict(self) -> JsonObject:
        return {
            "field": self.field,
            "message": self.message,
            "code": self.code,
            "suggestion": self.suggestion,
        }


@dataclass
class ValidationResult:
    """Outcome of validating a property map against an object type."""

    object_type_id: str
    valid: bool = True
    resolved_properties: list[PropertyValue] = field(default_factory=list)
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    required_fields: list[str] = field(default_factory=list)
    optional_fields: list[str] = field(default_factory=list)

    def add_error(self, issue: ValidationIssue) -> None:
        self.errors.append(issue)
        self.valid = False

    def has_error(self, code: str, field_name: str) -> bool:
        lowered = field_name.lower()
        return any(e.code == code and e.field.lower() == lowered for e in self.errors)

    def to_dict(self) -> JsonObject:
        return {
            "valid": self.valid,
            "object_type_id": self.object_type_id,
            "resolved_properties": [p.to_dict() for p in self.resolved_properties],
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "required_fields": list(self.required_fields),
            "optional_fields": list(self.optional_fields),
        }


@dataclass(frozen=True)
class DefaultApplication:
    """A default value synthesized during completion."""

    field: str
    value: Any
    reason: str
    confidence: str

    def to_dict(self) -> JsonObject:
        return {"field": self.field, "value": self.value, "reason": self.reason, "confidence": self.confidence}


@dataclass(frozen=True)
class CompletionSuggestion:
    """Guidance for a field the caller has not supplied."""

    field: str
    message: str
    required: bool
    priority: str
    options: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {
            "field": self.field,
            "message": self.message,
            "required": self.required,
            "priority": self.priority,
            "options": list(self.options),
        }


@dataclass
class CompletionResult:
    """Outcome of completing a partial property map."""

    object_type_id: str
    original_properties: dict[str, Any]
    completed_properties: dict[str, Any]
    success: bool = True
    resolved_properties: list[PropertyValue] = field(default_factory=list)
    applied_defaults: list[DefaultApplication] = field(default_factory=list)
    suggestions: list[CompletionSuggestion] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    missing_critical: list[str] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        return {
            "success": self.success,
            "object_type_id": self.object_type_id,
            "original_properties": dict(self.original_properties),
            "completed_properties": dict(self.completed_properties),
            "resolved_properties": [p.to_dict() for p in self.resolved_properties],
            "applied_defaults": [d.to_dict() for d in self.applied_defaults],
            "suggestions": [s.to_dict() for s in self.suggestions],
            "warnings": [w.to_dict() for w in self.warnings],
            "missing_critical": list(self.missing_critical),
        }


def _entities_to_payload(entities: Mapping[str, EntityInfo]) -> dict[str, EntityPayload]:
    return {key: entity.to_payload() for key, entity in entities.items()}


def _entities_from_payload(raw: object, label: str) -> dict[str, EntityInfo]:
    if not isinstance(raw, dict):
        raise ValueError(f"{label} must be a JSON object")
    entities: dict[str, EntityInfo] = {}
    for key, value in raw.items():
        if not isinstance(value, dict):
            raise ValueError(f"{label}[{key!r}] must be a JSON object")
        entities[key] = EntityInfo.from_payload(value)
    return entities


def _parse_timestamp(raw: object, label: str) -> datetime:
    if not isinstance(raw, str):
        raise ValueError(f"{label} must be an ISO-8601 string")
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        raise ValueError(f"{label} must include a UTC offset")
    return parsed
