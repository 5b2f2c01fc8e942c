"""
Condition models.

A condition is an immutable description of one search predicate on a
single field, before compilation.  Every variant shares ``boost`` and
``field``; the ``type`` tag selects the variant on the wire.

Construction never validates ranges: a condition with ``max_edits=3``
or a blank field is a perfectly valid *value*.  Range and presence
checks happen in :meth:`Condition.compile`, which is where a request
is accepted or rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from .compilers import build_default_registry
from .field_types import ConditionType
from .query import MAXIMUM_SUPPORTED_DISTANCE

if TYPE_CHECKING:
    from .compilers import CompilerRegistry
    from .ports import FieldTypeResolver, TextAnalyzer
    from .query import Query

DEFAULT_BOOST = 1.0

DEFAULT_MAX_EDITS = MAXIMUM_SUPPORTED_DISTANCE
DEFAULT_PREFIX_LENGTH = 0
DEFAULT_MAX_EXPANSIONS = 50
DEFAULT_TRANSPOSITIONS = True

DEFAULT_SLOP = 0


class Condition(BaseModel):
    """
    Shared contract of all conditions.

    Attributes:
        boost: Multiplier applied to the score of documents matching
            the compiled query.  ``None`` means :data:`DEFAULT_BOOST`.
        field: Target index field, lowercased on construction.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    type: str
    boost: float = DEFAULT_BOOST
    field: str | None = None

    # An explicit ``None`` for a tunable parameter means "use the default".
    @field_validator(
        "boost",
        "max_edits",
        "prefix_length",
        "max_expansions",
        "transpositions",
        "slop",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def none_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("field", mode="after")
    @classmethod
    def lowercase_field(cls, value: str | None) -> str | None:
        return value.lower() if value is not None else None

    @property
    def condition_type(self) -> ConditionType:
        return ConditionType(self.type)

    def compile(
        self,
        resolver: FieldTypeResolver,
        analyzer: TextAnalyzer,
        *,
        registry: CompilerRegistry | None = None,
    ) -> Query:
        """
        Validate this condition and compile it into an engine query.

        Args:
            resolver: Maps a field name to its declared type.
            analyzer: Normalizes raw text for a field.
            registry: Compilers to dispatch to.  Defaults to the
                built-in fuzzy / regexp / phrase compilers.

        Raises:
            MissingFieldError, MissingValueError, OutOfRangeParameterError:
                If a parameter is absent or out of range.
            UnsupportedFieldTypeError: If the field's type cannot
                support this kind of matching.
        """
        registry = registry if registry is not None else build_default_registry()
        return registry.compile(self, resolver, analyzer)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")

    def __str__(self) -> str:
        parts = ", ".join(
            f"{name}={_display(getattr(self, name))}"
            for name in type(self).model_fields
            if name != "type"
        )
        return f"{type(self).__name__} [{parts}]"


class FuzzyCondition(Condition):
    """
    Approximate match on a single term.

    Similarity is measured with Damerau-Levenshtein distance (optimal
    string alignment); pass ``transpositions=False`` for classic
    Levenshtein.
    """

    type: Literal["fuzzy"] = "fuzzy"
    value: str | None = None
    max_edits: int = DEFAULT_MAX_EDITS
    prefix_length: int = DEFAULT_PREFIX_LENGTH
    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    transpositions: bool = DEFAULT_TRANSPOSITIONS


class RegexpCondition(Condition):
    """Regular-expression match. ``value`` is used verbatim, never analyzed."""

    type: Literal["regexp"] = "regexp"
    value: str | None = None


class PhraseCondition(Condition):
    """
    Ordered terms within ``slop`` positions of each other.

    ``None`` entries in ``values`` are skipped but still take up a
    position, so ``["quick", None, "fox"]`` means "quick, any word, fox".
    """

    type: Literal["phrase"] = "phrase"
    values: tuple[str | None, ...] | None = None
    slop: int = DEFAULT_SLOP


def _display(value: Any) -> Any:
    return list(value) if isinstance(value, tuple) else value
