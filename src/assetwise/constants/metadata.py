"""Remote attribute type codes and data-type names."""

from __future__ import annotations

ATTRIBUTE_TYPE_REFERENCE: int = 1
ATTRIBUTE_TYPE_STATUS: int = 7

DATA_TYPE_REFERENCE: str = "Reference"
DATA_TYPE_STATUS: str = "Status"
DATA_TYPE_SELECT: str = "Select"
DATA_TYPE_DATE: str = "Date"
DATA_TYPES_DATETIME: frozenset[str] = frozenset({"DateTime", "type_6"})

SELECT_OPTION_SEPARATOR: str = ", "

DATE_FORMAT: str = "%Y-%m-%d"
DATETIME_FORMATS: tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
)
