"""Property resolution: typed conversion of raw property maps.

Errors are tagged with a ``kind`` and keep the historical message wording,
which downstream classification also understands when no kind is given.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from assetwise.constants.metadata import (
    DATA_TYPE_DATE,
    DATA_TYPE_REFERENCE,
    DATA_TYPE_SELECT,
    DATA_TYPE_STATUS,
    DATA_TYPES_DATETIME,
    DATE_FORMAT,
    DATETIME_FORMATS,
)
from assetwise.constants.validation import (
    KIND_INVALID_DATE,
    KIND_INVALID_DATETIME,
    KIND_INVALID_OPTION,
    KIND_INVALID_REFERENCE,
    KIND_INVALID_STATUS,
    KIND_METADATA,
    KIND_NOT_EDITABLE,
    KIND_REQUIRED,
    KIND_UNKNOWN,
)
from assetwise.exceptions import MetadataFetchError
from assetwise.metadata import AttributeMetadataResolver, field_key, index_metadata
from assetwise.model import AttributeMetadata, PropertyError, PropertyValue


class PropertyResolutionError(ValueError):
    """Raised by ``resolve_property`` for a single invalid value."""

    def __init__(self, kind: str, message: str, allowed: tuple[str, ...] = ()) -> None:
        self.kind = kind
        self.allowed = allowed
        super().__init__(message)


class PropertyResolver:
    """Resolves property maps against live attribute metadata."""

    def __init__(self, metadata: AttributeMetadataResolver) -> None:
        self.metadata = metadata

    def resolve(
        self,
        object_type_id: str,
        properties: Mapping[str, Any],
    ) -> tuple[list[PropertyValue], list[PropertyError]]:
        try:
            metadata = self.metadata.fetch(object_type_id)
        except MetadataFetchError as exc:
            return [], [PropertyError(field="", message=str(exc), kind=KIND_METADATA)]

        by_name = index_metadata(metadata)
        resolved: list[PropertyValue] = []
        errors: list[PropertyError] = []

        for prop_name, prop_value in properties.items():
            meta = by_name.get(field_key(prop_name))
            if meta is None:
                errors.append(PropertyError(field=prop_name, message=f"unknown property: {prop_name}", kind=KIND_UNKNOWN))
                continue
            try:
                value = resolve_property(meta, prop_value)
            except PropertyResolutionError as exc:
                errors.append(
                    PropertyError(
                        field=prop_name,
                        message=f"failed to resolve property '{prop_name}': {exc}",
                        kind=exc.kind,
                        allowed=exc.allowed,
                    )
                )
                continue
            if value is not None:
                resolved.append(value)

        supplied = {field_key(name) for name in properties}
        for meta in metadata:
            if meta.required and not meta.system and field_key(meta.name) not in supplied:
                errors.append(
                    PropertyError(
                        field=meta.name,
                        message=f"validation error for {meta.name}: required field is missing",
                        kind=KIND_REQUIRED,
                    )
                )

        return resolved, errors


def resolve_property(meta: AttributeMetadata, value: Any) -> PropertyValue | None:
    """Validate and convert one value; ``None`` for empty optional values."""
    if _is_empty(value):
        if meta.required:
            raise PropertyResolutionError(KIND_REQUIRED, _attr_message(meta, "required field is missing"))
        return None

    if not meta.editable and not meta.system:
        raise PropertyResolutionError(KIND_NOT_EDITABLE, _attr_message(meta, "field is not editable"))

    text = str(value)
    data_type = meta.data_type

    if data_type == DATA_TYPE_DATE:
        try:
            resolved: Any = datetime.strptime(text, DATE_FORMAT).date().isoformat()
        except ValueError as exc:
            raise PropertyResolutionError(KIND_INVALID_DATE, _attr_message(meta, f"invalid date format: {exc}")) from exc
    elif data_type in DATA_TYPES_DATETIME:
        parsed = parse_datetime(text)
        if parsed is None:
            raise PropertyResolutionError(
                KIND_INVALID_DATETIME,
                _attr_message(meta, "invalid datetime format: unable to parse datetime, supported formats: ISO 8601, RFC3339"),
            )
        resolved = parsed.isoformat()
    elif data_type == DATA_TYPE_SELECT:
        match = next((option for option in meta.select_options if option.lower() == text.lower()), None)
        if match is None:
            allowed = ", ".join(meta.select_options)
            raise PropertyResolutionError(
                KIND_INVALID_OPTION,
                _attr_message(meta, f"invalid option '{text}', allowed: {allowed}"),
                allowed=meta.select_options,
            )
        resolved = match
    elif data_type == DATA_TYPE_STATUS:
        if text not in meta.status_values:
            allowed = ", ".join(meta.status_values)
            raise PropertyResolutionError(
                KIND_INVALID_STATUS,
                _attr_message(meta, f"invalid status value '{text}', allowed IDs: {allowed}"),
                allowed=meta.status_values,
            )
        resolved = text
    elif data_type == DATA_TYPE_REFERENCE:
        try:
            int(text)
        except ValueError as exc:
            raise PropertyResolutionError(
                KIND_INVALID_REFERENCE,
                f"reference field '{meta.name}' requires object ID, got: {text}",
            ) from exc
        resolved = text
    else:
        resolved = text

    return PropertyValue(attribute_id=meta.id, field=meta.name, value=resolved, data_type=data_type)


def parse_datetime(text: str) -> datetime | None:
    """Parse ISO 8601 / RFC 3339 text; naive values are taken as UTC."""
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in DATETIME_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
            except ValueError:
                continue
            break
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _attr_message(meta: AttributeMetadata, message: str) -> str:
    return f"validation error for {meta.name}: {message}"


def _is_empty(value: Any) -> bool:
    return value is None or value == ""
