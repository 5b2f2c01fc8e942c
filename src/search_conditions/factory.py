"""
Build conditions from their wire representation.

A condition document is a JSON object whose ``type`` tag selects the
variant; unrecognized keys are ignored::

    {"type": "fuzzy", "field": "name", "value": "jon", "maxEdits": 1}
    {"type": "regexp", "field": "code", "value": "AB.*", "boost": 2.0}
    {"type": "phrase", "field": "title", "values": ["quick", null, "fox"], "slop": 1}
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Union

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .conditions import Condition, FuzzyCondition, PhraseCondition, RegexpCondition
from .exceptions import ConditionParseError
from .field_types import ConditionType

logger = logging.getLogger(__name__)

AnyCondition = Annotated[
    Union[FuzzyCondition, RegexpCondition, PhraseCondition],
    Field(discriminator="type"),
]

_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnyCondition)
_VALID_TYPES: list[str] = [t.value for t in ConditionType]


class ConditionFactory:
    """
    Factory for creating conditions from dictionary / JSON representations.

    Supports:
    - ``from_dict(data)`` — build from a parsed document
    - ``from_json(text)`` — parse a JSON string
    - ``validate(data)``  — collect problems without constructing
    """

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Condition:
        """
        Create a condition from a dictionary.

        Only the structure is checked here.  Parameter ranges and
        required values are checked when the condition is compiled.

        Raises:
            ConditionParseError: If the document is not an object, its
                ``type`` is missing or unknown, or a parameter has the
                wrong type.
        """
        tag = ConditionFactory._validate_tag(data)
        try:
            condition = _ADAPTER.validate_python({**data, "type": tag})
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            raise ConditionParseError(
                f"Invalid '{tag}' condition: {_describe(exc)}",
                path=_loc_to_path(first["loc"]),
            ) from exc
        logger.debug("Built condition %s", condition)
        return condition

    @staticmethod
    def from_json(text: str) -> Condition:
        """Parse a JSON string and build a condition."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConditionParseError(f"Invalid JSON: {exc}", path="<root>") from exc
        return ConditionFactory.from_dict(data)

    @staticmethod
    def validate(data: Any) -> list[str]:
        """
        Return a list of problems with a condition document.

        Returns an empty list when the document would build a condition.
        """
        try:
            ConditionFactory.from_dict(data)
        except ConditionParseError as exc:
            return [f"{exc.path}: {exc.message}"]
        return []

    # -- internals -----------------------------------------------------------

    @staticmethod
    def _validate_tag(data: Any) -> str:
        if not isinstance(data, dict):
            raise ConditionParseError(
                f"Expected a JSON object, got {type(data).__name__}",
                path="<root>",
            )
        tag = data.get("type")
        if not tag or not isinstance(tag, str):
            raise ConditionParseError("Missing or empty 'type' key", path="type")
        tag = tag.lower()
        if tag not in _VALID_TYPES:
            raise ConditionParseError(
                f"Unknown condition type: '{tag}'.",
                path="type",
                invalid_type=tag,
                valid_types=_VALID_TYPES,
            )
        return tag


def _loc_to_path(loc: tuple[int | str, ...]) -> str:
    # The first element is the discriminator tag.
    return ".".join(str(part) for part in loc[1:]) or "<root>"


def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{_loc_to_path(error['loc'])}: {error['msg']}" for error in exc.errors()
    )
