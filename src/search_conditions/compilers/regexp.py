"""Regexp condition -> RegexpQuery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import UnsupportedFieldTypeError
from ..field_types import ConditionType
from ..query import RegexpQuery, Term
from .base import ConditionCompiler, require_field, require_value, resolve_field_type

if TYPE_CHECKING:
    from ..conditions import RegexpCondition
    from ..ports import FieldTypeResolver, TextAnalyzer


class RegexpCompiler(ConditionCompiler["RegexpCondition"]):
    """
    Builds a pattern query from the raw value.

    The analyzer is never applied; tokenizing or case-folding would
    corrupt the pattern metacharacters.
    """

    @property
    def name(self) -> ConditionType:
        return ConditionType.REGEXP

    def compile(
        self,
        condition: RegexpCondition,
        resolver: FieldTypeResolver,
        analyzer: TextAnalyzer,
    ) -> RegexpQuery:
        field = require_field(condition.field)
        value = require_value(condition.value)

        field_type = resolve_field_type(resolver, field)
        if not field_type.is_char_seq:
            raise UnsupportedFieldTypeError(
                f"Regexp queries are not supported by {field_type} mapper",
                field=field,
                field_type=field_type,
                query_kind=self.name.value,
            )
        return RegexpQuery(term=Term(field, value), boost=condition.boost)
