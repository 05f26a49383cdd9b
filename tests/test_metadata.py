"""Tests for attribute metadata retrieval and shaping."""

from __future__ import annotations

import pytest
from conftest import LAPTOP_TYPE_ID, FakeMetadataSource

from assetwise.exceptions import MetadataFetchError
from assetwise.metadata import AttributeMetadataResolver, field_key, index_metadata, lookup_field, shape_attribute


def test_fetch_preserves_source_order(metadata_resolver: AttributeMetadataResolver) -> None:
    metadata = metadata_resolver.fetch(LAPTOP_TYPE_ID)

    assert [meta.name for meta in metadata][:3] == ["Key", "name", "serial_number"]


def test_fetch_is_live_on_every_call(
    metadata_resolver: AttributeMetadataResolver,
    metadata_source: FakeMetadataSource,
) -> None:
    metadata_resolver.fetch(LAPTOP_TYPE_ID)
    metadata_source.attributes[LAPTOP_TYPE_ID].append({"id": "999", "name": "warranty_end", "data_type": "Date"})

    metadata = metadata_resolver.fetch(LAPTOP_TYPE_ID)

    assert metadata_source.calls == [LAPTOP_TYPE_ID, LAPTOP_TYPE_ID]
    assert metadata[-1].name == "warranty_end"


def test_shaping_rules(metadata_resolver: AttributeMetadataResolver) -> None:
    by_key = index_metadata(metadata_resolver.fetch(LAPTOP_TYPE_ID))

    assert by_key["key"].system is True
    assert by_key["key"].editable is False
    assert by_key["serial_number"].required is True
    assert by_key["name"].required is False
    assert by_key["purchase_date"].data_type == "Date"
    assert by_key["last_seen"].data_type == "type_6"
    assert by_key["device_type"].select_options == ("Physical", "Virtual")
    assert by_key["ownership_type"].select_options == ("BYOD", "Company owned")
    assert by_key["asset_status"].data_type == "Status"
    assert by_key["asset_status"].status_values == ("201", "202")
    assert by_key["owner"].data_type == "Reference"
    assert by_key["owner"].reference_object_type == "55"


def test_select_options_ignored_for_non_select_types() -> None:
    meta = shape_attribute({"id": "1", "name": "notes", "data_type": "Text", "options": "a, b"})

    assert meta.select_options == ()


def test_source_failure_becomes_metadata_fetch_error(metadata_source: FakeMetadataSource) -> None:
    metadata_source.fail_with = ConnectionError("remote unavailable")
    resolver = AttributeMetadataResolver(metadata_source)

    with pytest.raises(MetadataFetchError, match="remote unavailable") as excinfo:
        resolver.fetch(LAPTOP_TYPE_ID)

    assert excinfo.value.object_type_id == LAPTOP_TYPE_ID


@pytest.mark.parametrize(
    "records",
    [
        {"attributes": []},
        [{"id": "1"}],
        [{"id": "1", "name": "x", "minimum_cardinality": "one"}],
        ["not-a-record"],
    ],
    ids=["not_a_list", "missing_name", "bad_cardinality", "non_mapping_record"],
)
def test_malformed_payloads_raise(records: object) -> None:
    source = FakeMetadataSource({"7": records})
    resolver = AttributeMetadataResolver(source)

    with pytest.raises(MetadataFetchError):
        resolver.fetch("7")


def test_field_key_and_lookup_normalize_names() -> None:
    assert field_key(" Asset Status ") == "asset_status"
    assert lookup_field({"Serial Number": "X1"}, "serial_number") == (True, "X1")
    assert lookup_field({}, "serial_number") == (False, None)
