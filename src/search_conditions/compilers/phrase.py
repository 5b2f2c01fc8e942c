"""Phrase condition -> PhraseQuery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import (
    MissingValueError,
    OutOfRangeParameterError,
    UnsupportedFieldTypeError,
)
from ..field_types import ConditionType
from ..query import PhraseQuery, PhraseTerm
from .base import ConditionCompiler, require_field, resolve_field_type

if TYPE_CHECKING:
    from ..conditions import PhraseCondition
    from ..ports import FieldTypeResolver, TextAnalyzer


class PhraseCompiler(ConditionCompiler["PhraseCondition"]):
    """Builds a positional phrase query from the analyzed values."""

    @property
    def name(self) -> ConditionType:
        return ConditionType.PHRASE

    def compile(
        self,
        condition: PhraseCondition,
        resolver: FieldTypeResolver,
        analyzer: TextAnalyzer,
    ) -> PhraseQuery:
        field = require_field(condition.field)
        if condition.values is None:
            raise MissingValueError("Field values required", parameter="values")
        if condition.slop < 0:
            raise OutOfRangeParameterError(
                "Slop must be positive",
                parameter="slop",
                value=condition.slop,
                constraint="slop >= 0",
            )

        field_type = resolve_field_type(resolver, field)
        if not field_type.is_char_seq:
            raise UnsupportedFieldTypeError(
                "Phrase queries cannot be supported until mapping is defined "
                f"(field '{field}' is mapped as {field_type})",
                field=field,
                field_type=field_type,
                query_kind=self.name.value,
            )

        # Every entry takes a position, even when it yields no term,
        # so that slop is measured against the phrase as written.
        terms: list[PhraseTerm] = []
        for position, value in enumerate(condition.values):
            if value is None:
                continue
            analyzed = analyzer(field, value)
            if analyzed:
                terms.append(PhraseTerm(analyzed, position))

        return PhraseQuery(
            field=field,
            terms=tuple(terms),
            slop=condition.slop,
            boost=condition.boost,
        )
