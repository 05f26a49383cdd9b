"""Default-synthesis and suggestion constants for object completion."""

from __future__ import annotations

CONFIDENCE_HIGH: str = "high"
CONFIDENCE_MEDIUM: str = "medium"
CONFIDENCE_LOW: str = "low"

PRIORITY_CRITICAL: str = "critical"
PRIORITY_IMPORTANT: str = "important"
PRIORITY_OPTIONAL: str = "optional"

DATA_TYPE_SELECT: str = "Select"
DATA_TYPE_STATUS: str = "Status"

PREFERRED_DEVICE_TYPE: str = "Physical"
PREFERRED_OWNERSHIP_TOKEN: str = "company"

ASSET_TAG_MAX_LENGTH: int = 20

IMPORTANT_FIELDS: tuple[str, ...] = ("serial_number", "model_name", "purchase_date")

FIELD_GUIDANCE: dict[str, str] = {
    "serial_number": " (helps with warranty tracking and asset identification)",
    "model_name": " (links to hardware specifications and compatibility)",
    "purchase_date": " (important for warranty and depreciation tracking)",
    "asset_tag": " (unique identifier for physical asset management)",
}
