"""Attribute metadata retrieval and shaping for object types."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from assetwise.constants.metadata import (
    ATTRIBUTE_TYPE_REFERENCE,
    ATTRIBUTE_TYPE_STATUS,
    DATA_TYPE_REFERENCE,
    DATA_TYPE_SELECT,
    DATA_TYPE_STATUS,
    SELECT_OPTION_SEPARATOR,
)
from assetwise.exceptions import MetadataFetchError
from assetwise.model import AttributeMetadata
from assetwise.types import MetadataSource


class AttributeMetadataResolver:
    """Fetches the current attribute definitions of an object type.

    Every call is a live fetch; definitions may change between successive
    validations in one workflow.
    """

    def __init__(self, source: MetadataSource) -> None:
        self.source = source

    def fetch(self, object_type_id: str) -> list[AttributeMetadata]:
        """Return attribute metadata in source order.

        Raises:
            MetadataFetchError: the source failed or returned a malformed payload.
        """
        try:
            records = self.source.get_object_type_attributes(object_type_id)
        except MetadataFetchError:
            raise
        except Exception as exc:
            raise MetadataFetchError(object_type_id, str(exc)) from exc

        if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
            raise MetadataFetchError(object_type_id, f"unexpected response format: {type(records).__name__}")

        metadata: list[AttributeMetadata] = []
        for record in records:
            if record is None:
                continue
            if not isinstance(record, Mapping):
                raise MetadataFetchError(object_type_id, f"attribute record is not a mapping: {record!r}")
            try:
                metadata.append(shape_attribute(record))
            except (TypeError, ValueError) as exc:
                raise MetadataFetchError(object_type_id, str(exc)) from exc
        return metadata


def index_metadata(metadata: Sequence[AttributeMetadata]) -> dict[str, AttributeMetadata]:
    """Index metadata by normalized attribute name; later duplicates win."""
    return {field_key(meta.name): meta for meta in metadata}


def shape_attribute(record: Mapping[str, Any]) -> AttributeMetadata:
    """Convert a raw attribute record into ``AttributeMetadata``."""
    name = record.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"attribute record has no name: {dict(record)!r}")
    attr_id = record.get("id")
    attr_id = str(attr_id) if attr_id is not None else name

    if "required" in record:
        required = bool(record["required"])
    else:
        required = _as_int(record.get("minimum_cardinality", 0)) >= 1

    data_type = _data_type(record)
    reference_object_type: str | None = None
    status_values = _string_tuple(record.get("status_values", ()))
    select_options = _select_options(record.get("select_options", record.get("options")))

    attr_type = record.get("type")
    reference_id = record.get("reference_object_type_id")
    if attr_type == ATTRIBUTE_TYPE_REFERENCE and reference_id:
        data_type = DATA_TYPE_REFERENCE
        reference_object_type = str(reference_id)

    type_values = _string_tuple(record.get("type_value_multi", ()))
    if attr_type == ATTRIBUTE_TYPE_STATUS and type_values:
        data_type = DATA_TYPE_STATUS
        status_values = type_values

    if data_type != DATA_TYPE_SELECT:
        select_options = ()

    return AttributeMetadata(
        id=attr_id,
        name=name,
        data_type=data_type,
        required=required,
        editable=bool(record.get("editable", True)),
        system=bool(record.get("system", False)),
        select_options=select_options,
        status_values=status_values,
        reference_object_type=reference_object_type,
        description=str(record.get("description") or ""),
    )


def _data_type(record: Mapping[str, Any]) -> str:
    explicit = record.get("data_type")
    if isinstance(explicit, str) and explicit:
        return explicit
    default_type = record.get("default_type")
    if isinstance(default_type, Mapping):
        type_name = default_type.get("name")
        if isinstance(type_name, str) and type_name:
            return type_name
        type_id = _as_int(default_type.get("id", 0))
        if type_id > 0:
            return f"type_{type_id}"
    return ""


def _select_options(raw: object) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return tuple(option for option in raw.split(SELECT_OPTION_SEPARATOR) if option)
    return _string_tuple(raw)


def _string_tuple(raw: object) -> tuple[str, ...]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise TypeError(f"expected a list of values, got {type(raw).__name__}")
    return tuple(str(value) for value in raw)


def _as_int(raw: object) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"expected an integer, got {raw!r}")
    return raw


def field_key(name: str) -> str:
    """Normalize a field or attribute name so ``Asset Tag`` matches ``asset_tag``."""
    return name.strip().lower().replace(" ", "_")


def lookup_field(values: Mapping[str, Any], name: str) -> tuple[bool, Any]:
    """Find ``name`` in ``values`` by normalized key, returning ``(found, value)``."""
    if name in values:
        return True, values[name]
    wanted = field_key(name)
    for key, value in values.items():
        if field_key(key) == wanted:
            return True, value
    return False, None
