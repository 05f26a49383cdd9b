"""Stable validation codes, suggestion text and business-rule constants."""

from __future__ import annotations

REQUIRED_FIELD_MISSING: str = "REQUIRED_FIELD_MISSING"
UNKNOWN_PROPERTY: str = "UNKNOWN_PROPERTY"
INVALID_DATE_FORMAT: str = "INVALID_DATE_FORMAT"
INVALID_DATETIME_FORMAT: str = "INVALID_DATETIME_FORMAT"
INVALID_SELECT_OPTION: str = "INVALID_SELECT_OPTION"
INVALID_REFERENCE: str = "INVALID_REFERENCE"
PROPERTY_ERROR: str = "PROPERTY_ERROR"

ASSET_TAG_TOO_SHORT: str = "ASSET_TAG_TOO_SHORT"
SUSPICIOUS_SERIAL_NUMBER: str = "SUSPICIOUS_SERIAL_NUMBER"
UNUSUAL_VIRTUAL_BYOD: str = "UNUSUAL_VIRTUAL_BYOD"
MISSING_RECOMMENDED_FIELD: str = "MISSING_RECOMMENDED_FIELD"
GENERIC_NAME: str = "GENERIC_NAME"

SEVERITY_ERROR: str = "error"

# Property-resolution error kinds.
KIND_REQUIRED: str = "required"
KIND_UNKNOWN: str = "unknown"
KIND_INVALID_DATE: str = "invalid_date"
KIND_INVALID_DATETIME: str = "invalid_datetime"
KIND_INVALID_OPTION: str = "invalid_option"
KIND_INVALID_STATUS: str = "invalid_status"
KIND_INVALID_REFERENCE: str = "invalid_reference"
KIND_NOT_EDITABLE: str = "not_editable"
KIND_METADATA: str = "metadata"

KIND_TO_CODE: dict[str, str] = {
    KIND_REQUIRED: REQUIRED_FIELD_MISSING,
    KIND_UNKNOWN: UNKNOWN_PROPERTY,
    KIND_INVALID_DATE: INVALID_DATE_FORMAT,
    KIND_INVALID_DATETIME: INVALID_DATETIME_FORMAT,
    KIND_INVALID_OPTION: INVALID_SELECT_OPTION,
    KIND_INVALID_REFERENCE: INVALID_REFERENCE,
}

# Ordered (needle, code) pairs for untagged error text. "invalid datetime"
# precedes "invalid date" because the latter is a prefix of the former.
TEXT_PATTERNS: tuple[tuple[str, str], ...] = (
    ("required field", REQUIRED_FIELD_MISSING),
    ("unknown property", UNKNOWN_PROPERTY),
    ("invalid datetime", INVALID_DATETIME_FORMAT),
    ("invalid date", INVALID_DATE_FORMAT),
    ("invalid option", INVALID_SELECT_OPTION),
    ("reference field", INVALID_REFERENCE),
)

FIELD_MARKER: str = "property '"
ALLOWED_MARKER: str = "allowed:"

SUGGESTION_REQUIRED: str = "Please provide a value for this required field"
SUGGESTION_UNKNOWN: str = (
    "Check the property name spelling or use 'assets attributes --type {object_type_id}' to see available fields"
)
SUGGESTION_DATE: str = "Use date format YYYY-MM-DD (e.g., 2024-01-15)"
SUGGESTION_DATETIME: str = "Use ISO 8601 format (e.g., 2024-01-15T10:30:00Z)"
SUGGESTION_OPTIONS: str = "Valid options: {options}"
SUGGESTION_REFERENCE: str = "Reference fields require valid object IDs"
SUGGESTION_CREATE_REQUIRED: str = "This field must be provided when creating new objects"

ASSET_TAG_MIN_LENGTH: int = 3
SUSPICIOUS_SERIAL_TOKEN: str = "test"

RECOMMENDED_FIELDS: tuple[str, ...] = ("asset_tag", "serial_number", "model_name")
GENERIC_NAMES: frozenset[str] = frozenset({"test", "laptop", "computer", "device", "asset"})
