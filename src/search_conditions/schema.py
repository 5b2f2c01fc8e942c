"""
Field mappings: the schema side of condition compilation.

A :class:`Schema` knows, for every mapped field, its declared
:class:`FieldType` and the analyzer that normalizes its text.  Its
``resolve_field_type`` and ``analyze`` methods satisfy the
:class:`~search_conditions.ports.FieldTypeResolver` and
:class:`~search_conditions.ports.TextAnalyzer` protocols.

Example configuration::

    {
        "default_analyzer": "standard",
        "fields": {
            "name": {"type": "text", "analyzer": "english"},
            "code": {"type": "string", "analyzer": "keyword"},
            "age": {"type": "integer"}
        }
    }
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .analysis import Analyzer, analyze_term, build_default_analyzers
from .exceptions import SchemaError
from .field_types import FieldType

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_ANALYZER = "standard"


class FieldMapping(BaseModel):
    """Declared type and analyzer of a single index field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: FieldType = FieldType.TEXT
    analyzer: str | None = Field(
        default=None, description="Analyzer name; falls back to the schema default"
    )


class SchemaConfig(BaseModel):
    """Wire representation of a :class:`Schema`."""

    model_config = ConfigDict(frozen=True)

    default_analyzer: str = DEFAULT_ANALYZER
    fields: dict[str, FieldMapping] = Field(default_factory=dict)

    @field_validator("fields", mode="after")
    @classmethod
    def lowercase_field_names(
        cls, fields: dict[str, FieldMapping]
    ) -> dict[str, FieldMapping]:
        return {name.lower(): mapping for name, mapping in fields.items()}


class Schema:
    """Read-only registry of field mappings and analyzers."""

    def __init__(
        self,
        fields: Mapping[str, FieldMapping | FieldType | str] | None = None,
        *,
        default_analyzer: str = DEFAULT_ANALYZER,
        analyzers: Mapping[str, Analyzer] | None = None,
    ) -> None:
        self._analyzers: dict[str, Analyzer] = build_default_analyzers()
        if analyzers:
            self._analyzers.update(analyzers)
        self._fields: dict[str, FieldMapping] = {
            name.lower(): _as_mapping(name, mapping)
            for name, mapping in (fields or {}).items()
        }
        self._check_analyzer(default_analyzer, "<default>")
        self.default_analyzer = default_analyzer
        for name, mapping in self._fields.items():
            if mapping.analyzer is not None:
                self._check_analyzer(mapping.analyzer, name)

    # -- construction --------------------------------------------------------

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        analyzers: Mapping[str, Analyzer] | None = None,
    ) -> Schema:
        """Build a schema from its dictionary configuration."""
        try:
            config = SchemaConfig.model_validate(data)
        except PydanticValidationError as exc:
            raise SchemaError(f"Invalid schema configuration: {exc}") from exc
        logger.debug(
            "Loaded schema with %d field mapping(s), default analyzer %r",
            len(config.fields),
            config.default_analyzer,
        )
        return cls(
            config.fields,
            default_analyzer=config.default_analyzer,
            analyzers=analyzers,
        )

    @classmethod
    def from_json(
        cls,
        text: str,
        *,
        analyzers: Mapping[str, Analyzer] | None = None,
    ) -> Schema:
        """Parse a JSON string and build a schema."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise SchemaError("Top-level JSON value must be an object")
        return cls.from_dict(data, analyzers=analyzers)

    def to_dict(self) -> dict[str, Any]:
        return SchemaConfig(
            default_analyzer=self.default_analyzer, fields=self._fields
        ).model_dump(mode="json")

    # -- look-up -------------------------------------------------------------

    @property
    def field_names(self) -> list[str]:
        return sorted(self._fields)

    def get(self, field: str) -> FieldMapping | None:
        """Return the mapping of *field*, or ``None`` if it is not mapped."""
        return self._fields.get(field.lower())

    def resolve_field_type(self, field: str) -> FieldType | None:
        mapping = self.get(field)
        return mapping.type if mapping is not None else None

    def analyzer_for(self, field: str) -> Analyzer:
        mapping = self.get(field)
        name = mapping.analyzer if mapping and mapping.analyzer else None
        return self._analyzers[name or self.default_analyzer]

    def analyze(self, field: str, text: str) -> str | None:
        """Normalize *text* into the single term the index stores for *field*."""
        return analyze_term(self.analyzer_for(field), field, text)

    # -- internals -----------------------------------------------------------

    def _check_analyzer(self, name: str, field: str) -> None:
        if name not in self._analyzers:
            raise SchemaError(
                f"Unknown analyzer '{name}' for field '{field}'. "
                f"Available analyzers: {', '.join(sorted(self._analyzers))}"
            )

    def __repr__(self) -> str:
        return (
            f"Schema(fields={len(self._fields)}, "
            f"default_analyzer={self.default_analyzer!r})"
        )


def _as_mapping(name: str, mapping: FieldMapping | FieldType | str) -> FieldMapping:
    if isinstance(mapping, FieldMapping):
        return mapping
    try:
        return FieldMapping(type=FieldType(mapping))
    except ValueError as exc:
        raise SchemaError(f"Unknown field type {mapping!r} for field '{name}'") from exc
