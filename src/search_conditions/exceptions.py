"""
Condition exception hierarchy.

All exceptions inherit from ``ConditionError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ConditionError(Exception):
    """Base exception for all condition errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(ConditionError):
    """Condition parameters failed validation."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class MissingFieldError(ValidationError):
    """The target field name is absent or blank."""

    def __init__(self, message: str = "Field name required") -> None:
        super().__init__(message, path="field")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_FIELD",
            "message": self.message,
        }


class MissingValueError(ValidationError):
    """A required value (or list of values) is absent or blank."""

    def __init__(self, message: str, parameter: str = "value") -> None:
        self.parameter = parameter
        super().__init__(message, path=parameter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_VALUE",
            "message": self.message,
            "parameter": self.parameter,
        }


class OutOfRangeParameterError(ValidationError):
    """
    A numeric parameter lies outside its accepted range.

    Carries the offending parameter name, its value and the
    constraint it broke (e.g. ``"0 <= max_edits <= 2"``).
    """

    def __init__(
        self,
        message: str,
        *,
        parameter: str,
        value: Any,
        constraint: str,
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(message, path=parameter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OUT_OF_RANGE_PARAMETER",
            "message": self.message,
            "parameter": self.parameter,
            "value": self.value,
            "constraint": self.constraint,
        }


class ConditionParseError(ValidationError):
    """
    A condition could not be built from its wire representation.

    When the condition ``type`` tag is unknown, fuzzy-matched
    suggestions for the likely intended tag are attached.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        *,
        invalid_type: str | None = None,
        valid_types: list[str] | None = None,
    ) -> None:
        self.invalid_type = invalid_type
        self.valid_types = valid_types or []
        self.suggestions = (
            get_close_matches(invalid_type, self.valid_types, n=3, cutoff=0.6)
            if invalid_type
            else []
        )
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message, path=path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONDITION_PARSE_ERROR",
            "message": self.message,
            "path": self.path,
            "suggestions": self.suggestions,
        }


class UnsupportedFieldTypeError(ConditionError):
    """The field's declared type cannot support the requested matching."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        field_type: Any,
        query_kind: str,
    ) -> None:
        self.field = field
        self.field_type = field_type
        self.query_kind = query_kind
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_FIELD_TYPE",
            "message": str(self),
            "field": self.field,
            "field_type": str(self.field_type),
            "query_kind": self.query_kind,
        }


class AnalysisError(ConditionError):
    """An analyzer produced output unusable for a single-term query."""

    def __init__(self, field: str, text: str, terms: list[str]) -> None:
        self.field = field
        self.text = text
        self.terms = terms
        super().__init__(
            f"Analyzer returned too many terms for '{field}': {text!r} -> {terms}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ANALYSIS_ERROR",
            "message": str(self),
            "field": self.field,
            "terms": self.terms,
        }


class SchemaError(ConditionError):
    """Invalid field mapping configuration."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SCHEMA_ERROR",
            "message": str(self),
        }
