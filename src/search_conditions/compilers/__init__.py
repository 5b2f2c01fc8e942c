"""
Condition compilers.

Usage::

    from search_conditions.compilers import build_default_registry

    registry = build_default_registry()
    query = registry.compile(condition, schema.resolve_field_type, schema.analyze)
"""

from __future__ import annotations

from .base import ConditionCompiler
from .fuzzy import FuzzyCompiler
from .phrase import PhraseCompiler
from .regexp import RegexpCompiler
from .registry import CompilerRegistry


def build_default_registry() -> CompilerRegistry:
    """Create a registry with the fuzzy, regexp and phrase compilers."""
    registry = CompilerRegistry()
    registry.register_all(
        FuzzyCompiler(),
        RegexpCompiler(),
        PhraseCompiler(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "CompilerRegistry",
    "ConditionCompiler",
    "FuzzyCompiler",
    "PhraseCompiler",
    "RegexpCompiler",
]
