"""Fuzzy condition -> FuzzyQuery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import OutOfRangeParameterError, UnsupportedFieldTypeError
from ..field_types import ConditionType, FieldType
from ..query import MAXIMUM_SUPPORTED_DISTANCE, FuzzyQuery, Term
from .base import ConditionCompiler, require_field, require_value, resolve_field_type

if TYPE_CHECKING:
    from ..conditions import FuzzyCondition
    from ..ports import FieldTypeResolver, TextAnalyzer

_FUZZY_FIELD_TYPES: frozenset[FieldType] = frozenset({FieldType.STRING, FieldType.TEXT})


class FuzzyCompiler(ConditionCompiler["FuzzyCondition"]):
    """
    Builds a bounded edit-distance query on the analyzed value.

    The value goes through the field's analyzer first so that it
    meets terms in their indexed form.  If the analyzer yields
    nothing, the ``None`` term text is passed on unchanged.
    """

    @property
    def name(self) -> ConditionType:
        return ConditionType.FUZZY

    def compile(
        self,
        condition: FuzzyCondition,
        resolver: FieldTypeResolver,
        analyzer: TextAnalyzer,
    ) -> FuzzyQuery:
        field = require_field(condition.field)
        value = require_value(condition.value)
        _check_parameters(condition)

        field_type = resolve_field_type(resolver, field)
        if field_type not in _FUZZY_FIELD_TYPES:
            raise UnsupportedFieldTypeError(
                f"Fuzzy queries cannot be supported for field type {field_type}",
                field=field,
                field_type=field_type,
                query_kind=self.name.value,
            )

        analyzed = analyzer(field, value)
        return FuzzyQuery(
            term=Term(field, analyzed),
            max_edits=condition.max_edits,
            prefix_length=condition.prefix_length,
            max_expansions=condition.max_expansions,
            transpositions=condition.transpositions,
            boost=condition.boost,
        )


def _check_parameters(condition: FuzzyCondition) -> None:
    if not 0 <= condition.max_edits <= MAXIMUM_SUPPORTED_DISTANCE:
        raise OutOfRangeParameterError(
            f"max_edits must be between 0 and {MAXIMUM_SUPPORTED_DISTANCE}",
            parameter="max_edits",
            value=condition.max_edits,
            constraint=f"0 <= max_edits <= {MAXIMUM_SUPPORTED_DISTANCE}",
        )
    if condition.prefix_length < 0:
        raise OutOfRangeParameterError(
            "prefix_length must be positive.",
            parameter="prefix_length",
            value=condition.prefix_length,
            constraint="prefix_length >= 0",
        )
    if condition.max_expansions < 0:
        raise OutOfRangeParameterError(
            "max_expansions must be positive.",
            parameter="max_expansions",
            value=condition.max_expansions,
            constraint="max_expansions >= 0",
        )
