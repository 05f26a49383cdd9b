"""Fixed business rules and best-practice checks for asset objects.

Each rule is a predicate over the submitted properties paired with the
verdict it produces. Adding a rule means appending to a registry; the
validator's flow does not change.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from assetwise.constants.validation import (
    ASSET_TAG_MIN_LENGTH,
    ASSET_TAG_TOO_SHORT,
    GENERIC_NAME,
    GENERIC_NAMES,
    MISSING_RECOMMENDED_FIELD,
    RECOMMENDED_FIELDS,
    SUSPICIOUS_SERIAL_NUMBER,
    SUSPICIOUS_SERIAL_TOKEN,
    UNUSUAL_VIRTUAL_BYOD,
)
from assetwise.metadata import field_key, lookup_field
from assetwise.model import AttributeMetadata, ValidationIssue, ValidationResult, ValidationWarning


@dataclass(frozen=True)
class RuleContext:
    """Inputs visible to rule predicates."""

    properties: Mapping[str, Any]
    metadata: Mapping[str, AttributeMetadata]

    def value(self, name: str) -> tuple[bool, Any]:
        return lookup_field(self.properties, name)

    def text(self, name: str) -> str | None:
        """Return the stringified value, or ``None`` when absent or empty."""
        found, value = self.value(name)
        if not found or value is None or value == "":
            return None
        return str(value)


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Callable[[RuleContext], bool]
    verdict: ValidationIssue | ValidationWarning


def apply_rules(rules: Sequence[Rule], context: RuleContext, result: ValidationResult) -> None:
    """Append the verdict of every rule whose predicate holds."""
    for rule in rules:
        if not rule.predicate(context):
            continue
        if isinstance(rule.verdict, ValidationIssue):
            result.add_error(rule.verdict)
        else:
            result.warnings.append(rule.verdict)


def _asset_tag_too_short(ctx: RuleContext) -> bool:
    tag = ctx.text("asset_tag")
    return tag is not None and len(tag) < ASSET_TAG_MIN_LENGTH


def _suspicious_serial(ctx: RuleContext) -> bool:
    serial = ctx.text("serial_number")
    return serial is not None and SUSPICIOUS_SERIAL_TOKEN in serial.lower()


def _virtual_byod(ctx: RuleContext) -> bool:
    device_type = ctx.text("device_type")
    ownership = ctx.text("ownership_type")
    if device_type is None or ownership is None:
        return False
    return device_type.lower() == "virtual" and ownership.lower() == "byod"


def _generic_name(ctx: RuleContext) -> bool:
    name = ctx.text("name")
    return name is not None and name.lower() in GENERIC_NAMES


def _missing_recommended(field_name: str) -> Callable[[RuleContext], bool]:
    def predicate(ctx: RuleContext) -> bool:
        found, _ = ctx.value(field_name)
        if found:
            return False
        meta = ctx.metadata.get(field_key(field_name))
        return meta is not None and meta.editable

    return predicate


BUSINESS_RULES: tuple[Rule, ...] = (
    Rule(
        name="asset_tag_min_length",
        predicate=_asset_tag_too_short,
        verdict=ValidationIssue(
            field="asset_tag",
            message=f"Asset tag should be at least {ASSET_TAG_MIN_LENGTH} characters long",
            code=ASSET_TAG_TOO_SHORT,
            suggestion="Use a longer, more descriptive asset tag",
        ),
    ),
    Rule(
        name="suspicious_serial_number",
        predicate=_suspicious_serial,
        verdict=ValidationWarning(
            field="serial_number",
            message="Serial number contains 'test' - ensure this is a real serial number",
            code=SUSPICIOUS_SERIAL_NUMBER,
            suggestion="Use the actual hardware serial number",
        ),
    ),
    Rule(
        name="virtual_byod_consistency",
        predicate=_virtual_byod,
        verdict=ValidationWarning(
            field="ownership_type",
            message="Virtual devices are typically not BYOD",
            code=UNUSUAL_VIRTUAL_BYOD,
            suggestion="Consider if this virtual device should be 'Company owned'",
        ),
    ),
)

BEST_PRACTICE_RULES: tuple[Rule, ...] = (
    *(
        Rule(
            name=f"recommended_{field_name}",
            predicate=_missing_recommended(field_name),
            verdict=ValidationWarning(
                field=field_name,
                message=f"Optional field '{field_name}' not provided",
                code=MISSING_RECOMMENDED_FIELD,
                suggestion=f"Consider providing {field_name} for better asset tracking",
            ),
        )
        for field_name in RECOMMENDED_FIELDS
    ),
    Rule(
        name="generic_name",
        predicate=_generic_name,
        verdict=ValidationWarning(
            field="name",
            message="Name is very generic",
            code=GENERIC_NAME,
            suggestion="Consider using a more specific name that includes model, user, or location",
        ),
    ),
)
