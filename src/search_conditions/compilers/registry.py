"""
Registry of condition compilers keyed by :class:`ConditionType`.

Custom compilers are added (or built-in ones replaced) by subclassing
:class:`ConditionCompiler` and registering via ``register()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..field_types import ConditionType

if TYPE_CHECKING:
    from ..ports import FieldTypeResolver, TextAnalyzer
    from ..query import Query
    from .base import ConditionCompiler


class CompilerRegistry:
    """
    Usage::

        registry = CompilerRegistry()
        registry.register(FuzzyCompiler())

        query = registry.compile(condition, schema.resolve_field_type, schema.analyze)
    """

    def __init__(self) -> None:
        self._compilers: dict[ConditionType, ConditionCompiler[Any]] = {}

    # -- registration --------------------------------------------------------

    def register(self, compiler: ConditionCompiler[Any]) -> None:
        """Register a compiler, replacing any previous one for its type."""
        self._compilers[compiler.name] = compiler

    def register_all(self, *compilers: ConditionCompiler[Any]) -> None:
        for compiler in compilers:
            self.register(compiler)

    # -- look-up -------------------------------------------------------------

    def get(self, name: ConditionType) -> ConditionCompiler[Any] | None:
        return self._compilers.get(name)

    # -- compilation ---------------------------------------------------------

    def compile(
        self,
        condition: Any,
        resolver: FieldTypeResolver,
        analyzer: TextAnalyzer,
    ) -> Query:
        """
        Look up the compiler for the condition's type and run it.

        Raises:
            ValueError: If no compiler is registered for the type.
        """
        name = ConditionType(condition.type)
        compiler = self.get(name)
        if compiler is None:
            raise ValueError(f"No compiler registered for condition type: {name}")
        return compiler.compile(condition, resolver, analyzer)
