"""Best-effort completion of partial asset property maps."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from assetwise.constants.completion import (
    ASSET_TAG_MAX_LENGTH,
    CONFIDENCE_HIGH,
    CONFIDENCE_LOW,
    CONFIDENCE_MEDIUM,
    DATA_TYPE_SELECT,
    DATA_TYPE_STATUS,
    FIELD_GUIDANCE,
    IMPORTANT_FIELDS,
    PREFERRED_DEVICE_TYPE,
    PREFERRED_OWNERSHIP_TOKEN,
    PRIORITY_CRITICAL,
    PRIORITY_IMPORTANT,
    PRIORITY_OPTIONAL,
)
from assetwise.constants.validation import KIND_METADATA, KIND_REQUIRED, REQUIRED_FIELD_MISSING
from assetwise.exceptions import MetadataFetchError
from assetwise.metadata import AttributeMetadataResolver, field_key, index_metadata, lookup_field
from assetwise.model import (
    AttributeMetadata,
    CompletionResult,
    CompletionSuggestion,
    DefaultApplication,
    PropertyError,
    ValidationResult,
)
from assetwise.types import LoggerLike, PropertyResolution
from assetwise.validation.rules import BEST_PRACTICE_RULES, BUSINESS_RULES, Rule, RuleContext, apply_rules
from assetwise.validation.validator import classify_error, extract_field


class CompletionEngine:
    """Fills in defaults and explains what is still missing from a partial object.

    Partial progress is always returned; ``success`` is false while required
    fields remain unresolved.
    """

    def __init__(
        self,
        metadata: AttributeMetadataResolver,
        properties: PropertyResolution,
        *,
        logger: LoggerLike | None = None,
        warning_rules: Sequence[Rule] = (*BUSINESS_RULES, *BEST_PRACTICE_RULES),
    ) -> None:
        self.metadata = metadata
        self.properties = properties
        self.warning_rules = tuple(warning_rules)
        self._log: LoggerLike = logger if logger is not None else logging.getLogger(__name__)

    def complete(self, object_type_id: str, partial: Mapping[str, Any]) -> CompletionResult:
        result = CompletionResult(
            object_type_id=object_type_id,
            original_properties=dict(partial),
            completed_properties=dict(partial),
        )

        metadata = self.metadata.fetch(object_type_id)
        by_key = index_metadata(metadata)

        apply_defaults(by_key, result)
        result.suggestions = build_suggestions(metadata, result.completed_properties)

        resolved, errors = self.properties.resolve(object_type_id, result.completed_properties)
        result.resolved_properties = list(resolved)
        for error in errors:
            if error.kind == KIND_METADATA:
                raise MetadataFetchError(object_type_id, error.message)
            field_name = _missing_required_field(error, object_type_id)
            if field_name and field_name not in result.missing_critical:
                result.missing_critical.append(field_name)

        scratch = ValidationResult(object_type_id=object_type_id)
        apply_rules(self.warning_rules, RuleContext(properties=result.completed_properties, metadata=by_key), scratch)
        result.warnings = scratch.warnings

        result.success = not result.missing_critical
        self._log.debug(
            "Completed object type %s: defaults=%d suggestions=%d missing=%s",
            object_type_id,
            len(result.applied_defaults),
            len(result.suggestions),
            result.missing_critical,
        )
        return result


def apply_defaults(metadata: Mapping[str, AttributeMetadata], result: CompletionResult) -> None:
    """Apply the fixed default-synthesis rules in order, recording each one used."""
    completed = result.completed_properties

    status_meta = metadata.get("asset_status")
    if not _has(completed, "asset_status") and status_meta is not None and status_meta.status_values:
        _apply(result, "asset_status", status_meta.status_values[0], "Applied default status value", CONFIDENCE_MEDIUM)

    device_meta = metadata.get("device_type")
    if not _has(completed, "device_type") and device_meta is not None and device_meta.select_options:
        options = device_meta.select_options
        device_type = next((o for o in options if o.lower() == PREFERRED_DEVICE_TYPE.lower()), options[0])
        _apply(result, "device_type", device_type, "Applied default device type", CONFIDENCE_HIGH)

    ownership_meta = metadata.get("ownership_type")
    if not _has(completed, "ownership_type") and ownership_meta is not None and ownership_meta.select_options:
        options = ownership_meta.select_options
        ownership = next((o for o in options if PREFERRED_OWNERSHIP_TOKEN in o.lower()), options[0])
        _apply(result, "ownership_type", ownership, "Applied default ownership type", CONFIDENCE_MEDIUM)

    found, name = lookup_field(completed, "name")
    if found and name not in (None, "") and not _has(completed, "asset_tag"):
        _apply(result, "asset_tag", derive_asset_tag(str(name)), "Generated asset tag from name", CONFIDENCE_LOW)


def derive_asset_tag(name: str) -> str:
    return name.upper().replace(" ", "-")[:ASSET_TAG_MAX_LENGTH]


def build_suggestions(
    metadata: Sequence[AttributeMetadata],
    completed: Mapping[str, Any],
) -> list[CompletionSuggestion]:
    """Suggest every non-system field that is still absent, in metadata order."""
    suggestions: list[CompletionSuggestion] = []
    for meta in metadata:
        if meta.system or _has(completed, meta.name):
            continue
        key = field_key(meta.name)

        if meta.required:
            priority = PRIORITY_CRITICAL
            message = f"Required field '{meta.name}' is missing"
        elif any(important in key for important in IMPORTANT_FIELDS):
            priority = PRIORITY_IMPORTANT
            message = f"Important field '{meta.name}' would improve asset tracking"
        else:
            priority = PRIORITY_OPTIONAL
            message = f"Optional field '{meta.name}' can be provided"

        options: tuple[str, ...] = ()
        if meta.data_type == DATA_TYPE_SELECT:
            options = meta.select_options
        elif meta.data_type == DATA_TYPE_STATUS:
            options = meta.status_values

        message += FIELD_GUIDANCE.get(key, "")
        suggestions.append(
            CompletionSuggestion(
                field=meta.name,
                message=message,
                required=meta.required,
                priority=priority,
                options=options,
            )
        )
    return suggestions


def _has(values: Mapping[str, Any], name: str) -> bool:
    found, _ = lookup_field(values, name)
    return found


def _apply(result: CompletionResult, field_name: str, value: Any, reason: str, confidence: str) -> None:
    result.completed_properties[field_name] = value
    result.applied_defaults.append(
        DefaultApplication(field=field_name, value=value, reason=reason, confidence=confidence)
    )


def _missing_required_field(error: PropertyError, object_type_id: str) -> str:
    if error.kind is not None and error.kind != KIND_REQUIRED:
        return ""
    issue = classify_error(error, object_type_id)
    if issue.code != REQUIRED_FIELD_MISSING:
        return ""
    return error.field or extract_field(error.message)
