"""
Collaborator protocols consumed by the condition compilers.

Both are plain callables so that a :class:`~search_conditions.schema.Schema`
bound method, a dict lookup or a lambda can be passed interchangeably.
Implementations must be safe for concurrent reads; compilers never
write to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .field_types import FieldType


class FieldTypeResolver(Protocol):
    """
    Resolve a field name to its declared type.

    Returns ``None`` when the field is unknown to the schema; callers
    treat that as :attr:`FieldType.TEXT`.  A type name such as
    ``"integer"`` is accepted in place of the enum member.
    """

    def __call__(self, field: str) -> FieldType | str | None:
        ...


class TextAnalyzer(Protocol):
    """
    Normalize raw text for a field into a single index term.

    Returns ``None`` when the text produces no tokens.
    """

    def __call__(self, field: str, text: str) -> str | None:
        ...
