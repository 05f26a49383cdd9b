"""Tests for property resolution and its error contract."""

from __future__ import annotations

import pytest
from conftest import LAPTOP_TYPE_ID

from assetwise.model import AttributeMetadata
from assetwise.properties import PropertyResolutionError, PropertyResolver, parse_datetime, resolve_property


def test_resolves_typed_values(property_resolver: PropertyResolver) -> None:
    resolved, errors = property_resolver.resolve(
        LAPTOP_TYPE_ID,
        {
            "serial_number": "SN-1",
            "device_type": "physical",
            "purchase_date": "2024-01-15",
            "last_seen": "2024-01-15 10:30:00",
            "Asset Status": "201",
            "owner": "384",
        },
    )

    assert errors == []
    values = {value.field: value.value for value in resolved}
    assert values == {
        "serial_number": "SN-1",
        "device_type": "Physical",
        "purchase_date": "2024-01-15",
        "last_seen": "2024-01-15T10:30:00+00:00",
        "Asset Status": "201",
        "owner": "384",
    }


def test_unknown_property_keeps_message_wording(property_resolver: PropertyResolver) -> None:
    _, errors = property_resolver.resolve(LAPTOP_TYPE_ID, {"serial_number": "SN", "colour": "red"})

    assert len(errors) == 1
    assert errors[0].kind == "unknown"
    assert errors[0].field == "colour"
    assert errors[0].message == "unknown property: colour"


def test_missing_required_property_is_reported(property_resolver: PropertyResolver) -> None:
    _, errors = property_resolver.resolve(LAPTOP_TYPE_ID, {})

    assert [(e.kind, e.field) for e in errors] == [("required", "serial_number")]
    assert "required field" in errors[0].message


def test_invalid_option_lists_allowed_values(property_resolver: PropertyResolver) -> None:
    _, errors = property_resolver.resolve(LAPTOP_TYPE_ID, {"serial_number": "SN", "device_type": "Cloud"})

    assert len(errors) == 1
    error = errors[0]
    assert error.kind == "invalid_option"
    assert error.allowed == ("Physical", "Virtual")
    assert error.message == (
        "failed to resolve property 'device_type': validation error for device_type: "
        "invalid option 'Cloud', allowed: Physical, Virtual"
    )


def test_empty_optional_values_are_skipped(property_resolver: PropertyResolver) -> None:
    resolved, errors = property_resolver.resolve(LAPTOP_TYPE_ID, {"serial_number": "SN", "notes": ""})

    assert errors == []
    assert [value.field for value in resolved] == ["serial_number"]


@pytest.mark.parametrize(
    ("meta", "value", "kind"),
    [
        (AttributeMetadata(id="1", name="d", data_type="Date"), "15/01/2024", "invalid_date"),
        (AttributeMetadata(id="1", name="dt", data_type="DateTime"), "yesterday", "invalid_datetime"),
        (AttributeMetadata(id="1", name="s", data_type="Status", status_values=("1",)), "Active", "invalid_status"),
        (AttributeMetadata(id="1", name="r", data_type="Reference"), "LAPTOP-1", "invalid_reference"),
        (AttributeMetadata(id="1", name="ro", data_type="Text", editable=False), "x", "not_editable"),
        (AttributeMetadata(id="1", name="req", data_type="Text", required=True), "", "required"),
    ],
    ids=["date", "datetime", "status", "reference", "not_editable", "required_empty"],
)
def test_resolve_property_error_kinds(meta: AttributeMetadata, value: str, kind: str) -> None:
    with pytest.raises(PropertyResolutionError) as excinfo:
        resolve_property(meta, value)

    assert excinfo.value.kind == kind


def test_reference_error_wording() -> None:
    meta = AttributeMetadata(id="1", name="owner", data_type="Reference")

    with pytest.raises(PropertyResolutionError, match="reference field 'owner' requires object ID, got: bob"):
        resolve_property(meta, "bob")


def test_parse_datetime_accepts_supported_formats() -> None:
    assert parse_datetime("2024-01-15T10:30:00Z") is not None
    assert parse_datetime("2024-01-15T10:30:00") is not None
    assert parse_datetime("2024-01-15 10:30:00") is not None
    assert parse_datetime("15 Jan 2024") is None
