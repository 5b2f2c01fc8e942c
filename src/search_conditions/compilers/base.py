"""
Compiler strategy interface and the checks every variant shares.

Each condition variant has one :class:`ConditionCompiler` that turns it
into an engine query.  Compilers are stateless: validate, resolve the
field type, (optionally) analyze, build.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..exceptions import MissingFieldError, MissingValueError
from ..field_types import FieldType

if TYPE_CHECKING:
    from ..field_types import ConditionType
    from ..ports import FieldTypeResolver, TextAnalyzer
    from ..query import Query

C = TypeVar("C", contravariant=True)


class ConditionCompiler(ABC, Generic[C]):
    """Strategy interface for compiling one condition variant."""

    @property
    @abstractmethod
    def name(self) -> ConditionType:
        """The condition type this compiler handles."""
        ...

    @abstractmethod
    def compile(
        self,
        condition: C,
        resolver: FieldTypeResolver,
        analyzer: TextAnalyzer,
    ) -> Query:
        """
        Compile *condition* into a boosted engine query.

        Raises:
            ValidationError: If a parameter is missing or out of range.
            UnsupportedFieldTypeError: If the field cannot support
                this kind of matching.
        """
        ...


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def require_field(field: str | None) -> str:
    """Return *field*, or raise if it is absent or blank."""
    if field is None or is_blank(field):
        raise MissingFieldError("Field name required")
    return field


def require_value(value: Any, parameter: str = "value") -> str:
    """Return *value*, or raise if it is absent or blank."""
    if value is None or is_blank(value):
        raise MissingValueError("Field value required", parameter=parameter)
    return value


def resolve_field_type(resolver: FieldTypeResolver, field: str) -> FieldType:
    """
    Resolve the declared type of *field*; unknown fields are text.

    Plain resolvers may answer with the type name (``"integer"``).
    """
    field_type = resolver(field)
    return FieldType(field_type) if field_type is not None else FieldType.TEXT
