"""Object validation against live attribute metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from assetwise.constants.validation import (
    ALLOWED_MARKER,
    FIELD_MARKER,
    INVALID_DATE_FORMAT,
    INVALID_DATETIME_FORMAT,
    INVALID_REFERENCE,
    INVALID_SELECT_OPTION,
    KIND_METADATA,
    KIND_TO_CODE,
    PROPERTY_ERROR,
    REQUIRED_FIELD_MISSING,
    SUGGESTION_CREATE_REQUIRED,
    SUGGESTION_DATE,
    SUGGESTION_DATETIME,
    SUGGESTION_OPTIONS,
    SUGGESTION_REFERENCE,
    SUGGESTION_REQUIRED,
    SUGGESTION_UNKNOWN,
    TEXT_PATTERNS,
    UNKNOWN_PROPERTY,
)
from assetwise.exceptions import MetadataFetchError
from assetwise.metadata import AttributeMetadataResolver, field_key, index_metadata
from assetwise.model import AttributeMetadata, PropertyError, ValidationIssue, ValidationResult
from assetwise.types import LoggerLike, PropertyResolution
from assetwise.validation.rules import BEST_PRACTICE_RULES, BUSINESS_RULES, Rule, RuleContext, apply_rules


class ObjectValidator:
    """Validates asset property maps for create and update operations.

    Validation problems are returned in the result, never raised. Only a
    failure to retrieve metadata aborts a call, with ``MetadataFetchError``.
    """

    def __init__(
        self,
        metadata: AttributeMetadataResolver,
        properties: PropertyResolution,
        *,
        logger: LoggerLike | None = None,
        business_rules: Sequence[Rule] = BUSINESS_RULES,
        best_practice_rules: Sequence[Rule] = BEST_PRACTICE_RULES,
    ) -> None:
        self.metadata = metadata
        self.properties = properties
        self.business_rules = tuple(business_rules)
        self.best_practice_rules = tuple(best_practice_rules)
        self._log: LoggerLike = logger if logger is not None else logging.getLogger(__name__)

    def validate(self, object_type_id: str, properties: Mapping[str, Any]) -> ValidationResult:
        metadata = self.metadata.fetch(object_type_id)
        return self._validate(object_type_id, properties, metadata)

    def validate_for_create(self, object_type_id: str, properties: Mapping[str, Any]) -> ValidationResult:
        """Validate and additionally require every required, non-system field."""
        metadata = self.metadata.fetch(object_type_id)
        result = self._validate(object_type_id, properties, metadata)

        supplied = {field_key(name) for name in properties}
        for meta in metadata:
            if not meta.required or meta.system or field_key(meta.name) in supplied:
                continue
            if result.has_error(REQUIRED_FIELD_MISSING, meta.name):
                continue
            result.add_error(
                ValidationIssue(
                    field=meta.name,
                    message=f"Required field '{meta.name}' is missing",
                    code=REQUIRED_FIELD_MISSING,
                    suggestion=SUGGESTION_CREATE_REQUIRED,
                )
            )
        return result

    def validate_for_update(self, object_type_id: str, properties: Mapping[str, Any]) -> ValidationResult:
        """Validate a partial update; required fields left out are not errors."""
        result = self.validate(object_type_id, properties)

        supplied = {field_key(name) for name in properties}
        kept = [
            issue
            for issue in result.errors
            if not (issue.code == REQUIRED_FIELD_MISSING and issue.field and field_key(issue.field) not in supplied)
        ]
        if len(kept) != len(result.errors):
            result.errors = kept
            result.valid = not kept
        return result

    def _validate(
        self,
        object_type_id: str,
        properties: Mapping[str, Any],
        metadata: Sequence[AttributeMetadata],
    ) -> ValidationResult:
        result = ValidationResult(object_type_id=object_type_id)
        for meta in metadata:
            if meta.required and not meta.system:
                result.required_fields.append(meta.name)
            elif meta.editable:
                result.optional_fields.append(meta.name)

        resolved, errors = self.properties.resolve(object_type_id, properties)
        result.resolved_properties = list(resolved)
        for error in errors:
            if error.kind == KIND_METADATA:
                raise MetadataFetchError(object_type_id, error.message)
            result.add_error(classify_error(error, object_type_id))

        context = RuleContext(properties=properties, metadata=index_metadata(metadata))
        apply_rules(self.business_rules, context, result)
        apply_rules(self.best_practice_rules, context, result)

        self._log.debug(
            "Validated object type %s: valid=%s errors=%d warnings=%d",
            object_type_id,
            result.valid,
            len(result.errors),
            len(result.warnings),
        )
        return result


def classify_error(error: PropertyError, object_type_id: str) -> ValidationIssue:
    """Map a property-resolution error onto the fixed validation taxonomy.

    The error's ``kind`` decides the code when present; otherwise the message
    text is matched against known phrases.
    """
    message = error.message
    code = KIND_TO_CODE.get(error.kind or "")
    if code is None:
        code = next((c for needle, c in TEXT_PATTERNS if needle in message), PROPERTY_ERROR)

    return ValidationIssue(
        field=error.field or extract_field(message),
        message=message,
        code=code,
        suggestion=_suggestion(code, error, object_type_id),
    )


def extract_field(message: str) -> str:
    """Pull the quoted name out of ``... property '<name>' ...`` text."""
    start = message.find(FIELD_MARKER)
    if start < 0:
        return ""
    start += len(FIELD_MARKER)
    end = message.find("'", start)
    if end <= start:
        return ""
    return message[start:end]


def _suggestion(code: str, error: PropertyError, object_type_id: str) -> str:
    if code == REQUIRED_FIELD_MISSING:
        return SUGGESTION_REQUIRED
    if code == UNKNOWN_PROPERTY:
        return SUGGESTION_UNKNOWN.format(object_type_id=object_type_id)
    if code == INVALID_DATE_FORMAT:
        return SUGGESTION_DATE
    if code == INVALID_DATETIME_FORMAT:
        return SUGGESTION_DATETIME
    if code == INVALID_SELECT_OPTION:
        if error.allowed:
            return SUGGESTION_OPTIONS.format(options=", ".join(error.allowed))
        marker = error.message.find(ALLOWED_MARKER)
        if marker >= 0:
            return SUGGESTION_OPTIONS.format(options=error.message[marker + len(ALLOWED_MARKER) :].strip())
        return ""
    if code == INVALID_REFERENCE:
        return SUGGESTION_REFERENCE
    return ""
