"""Shared pytest fixtures: in-memory remote collaborators and sample metadata."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from assetwise.completion import CompletionEngine
from assetwise.metadata import AttributeMetadataResolver
from assetwise.properties import PropertyResolver
from assetwise.validation import ObjectValidator

LAPTOP_TYPE_ID = "42"

LAPTOP_ATTRIBUTES: list[dict[str, Any]] = [
    {"id": "100", "name": "Key", "data_type": "Text", "required": True, "system": True, "editable": False},
    {"id": "101", "name": "name", "data_type": "Text", "minimum_cardinality": 0},
    {"id": "102", "name": "serial_number", "data_type": "Text", "minimum_cardinality": 1},
    {"id": "103", "name": "asset_tag", "data_type": "Text"},
    {"id": "104", "name": "model_name", "data_type": "Text"},
    {"id": "105", "name": "purchase_date", "default_type": {"id": 4, "name": "Date"}},
    {"id": "106", "name": "last_seen", "default_type": {"id": 6}},
    {"id": "107", "name": "device_type", "data_type": "Select", "options": "Physical, Virtual"},
    {"id": "108", "name": "ownership_type", "data_type": "Select", "select_options": ["BYOD", "Company owned"]},
    {"id": "109", "name": "Asset Status", "type": 7, "type_value_multi": ["201", "202"]},
    {"id": "110", "name": "owner", "type": 1, "reference_object_type_id": "55"},
    {"id": "111", "name": "notes", "data_type": "Text"},
]


class FakeMetadataSource:
    """Serves attribute records per object type and counts fetches."""

    def __init__(self, attributes: Mapping[str, Any]) -> None:
        self.attributes = {key: list(value) if isinstance(value, list) else value for key, value in attributes.items()}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None

    def get_object_type_attributes(self, object_type_id: str) -> Any:
        self.calls.append(object_type_id)
        if self.fail_with is not None:
            raise self.fail_with
        if object_type_id not in self.attributes:
            raise LookupError(f"object type {object_type_id} not found")
        records = self.attributes[object_type_id]
        return list(records) if isinstance(records, list) else records


class FakeCatalog:
    """Serves schemas and object types for resolver tests."""

    def __init__(self, schemas: list[dict[str, Any]], object_types: Mapping[str, list[dict[str, Any]]]) -> None:
        self.schemas = schemas
        self.object_types = dict(object_types)
        self.schema_calls = 0
        self.type_calls: list[str] = []

    def list_schemas(self) -> list[dict[str, Any]]:
        self.schema_calls += 1
        return list(self.schemas)

    def list_object_types(self, schema_id: str) -> list[dict[str, Any]]:
        self.type_calls.append(schema_id)
        if schema_id not in self.object_types:
            raise LookupError(f"schema {schema_id} has no object types")
        return list(self.object_types[schema_id])


class FrozenClock:
    """Controllable UTC clock."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def metadata_source() -> FakeMetadataSource:
    return FakeMetadataSource({LAPTOP_TYPE_ID: LAPTOP_ATTRIBUTES})


@pytest.fixture
def metadata_resolver(metadata_source: FakeMetadataSource) -> AttributeMetadataResolver:
    return AttributeMetadataResolver(metadata_source)


@pytest.fixture
def property_resolver(metadata_resolver: AttributeMetadataResolver) -> PropertyResolver:
    return PropertyResolver(metadata_resolver)


@pytest.fixture
def validator(metadata_resolver: AttributeMetadataResolver, property_resolver: PropertyResolver) -> ObjectValidator:
    return ObjectValidator(metadata_resolver, property_resolver)


@pytest.fixture
def engine(metadata_resolver: AttributeMetadataResolver, property_resolver: PropertyResolver) -> CompletionEngine:
    return CompletionEngine(metadata_resolver, property_resolver)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()
