"""
Engine query model.

Compiled conditions are expressed as these immutable query objects.
They carry everything the search engine needs to execute the match
(term, edit distance, positions, slop...) plus a ``boost`` weight, and
render themselves either as a query DSL document (``to_dict()``) or in
Lucene query syntax (``str()``).

Executing a query, expanding fuzzy candidates and enforcing clause
count ceilings are the engine's job and do not happen here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, TypeVar

MAXIMUM_SUPPORTED_DISTANCE = 2
"""Largest edit distance the engine's Levenshtein automata support."""

Q = TypeVar("Q", bound="Query")


@dataclass(frozen=True)
class Term:
    """A field paired with the text of one index term."""

    field: str
    text: str | None

    def __str__(self) -> str:
        return f"{self.field}:{self.text or ''}"


@dataclass(frozen=True, kw_only=True)
class Query(ABC):
    """Base class of all compiled queries."""

    boost: float = 1.0

    def with_boost(self: Q, boost: float) -> Q:
        """Return a copy of this query with a different boost."""
        return replace(self, boost=boost)

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Render as a query DSL document."""
        ...

    @abstractmethod
    def _syntax(self) -> str:
        ...

    def __str__(self) -> str:
        if self.boost != 1.0:
            return f"{self._syntax()}^{self.boost}"
        return self._syntax()


@dataclass(frozen=True, kw_only=True)
class FuzzyQuery(Query):
    """
    Matches terms within ``max_edits`` of ``term``.

    With ``transpositions`` an adjacent swap counts as one edit
    (Damerau-Levenshtein); otherwise classic Levenshtein distance is used.
    The first ``prefix_length`` characters must match exactly, and at
    most ``max_expansions`` candidate terms are considered.
    """

    term: Term
    max_edits: int = MAXIMUM_SUPPORTED_DISTANCE
    prefix_length: int = 0
    max_expansions: int = 50
    transpositions: bool = True

    @property
    def field(self) -> str:
        return self.term.field

    def to_dict(self) -> dict[str, Any]:
        return {
            "fuzzy": {
                self.term.field: {
                    "value": self.term.text,
                    "fuzziness": self.max_edits,
                    "prefix_length": self.prefix_length,
                    "max_expansions": self.max_expansions,
                    "transpositions": self.transpositions,
                    "boost": self.boost,
                }
            }
        }

    def _syntax(self) -> str:
        return f"{self.term}~{self.max_edits}"


@dataclass(frozen=True, kw_only=True)
class RegexpQuery(Query):
    """Matches terms against the regular expression held in ``term.text``."""

    term: Term

    @property
    def field(self) -> str:
        return self.term.field

    @property
    def pattern(self) -> str | None:
        return self.term.text

    def to_dict(self) -> dict[str, Any]:
        return {
            "regexp": {
                self.term.field: {
                    "value": self.term.text,
                    "boost": self.boost,
                }
            }
        }

    def _syntax(self) -> str:
        return f"{self.term.field}:/{self.term.text}/"


@dataclass(frozen=True)
class PhraseTerm:
    """A phrase term and its position relative to the start of the phrase."""

    text: str
    position: int


@dataclass(frozen=True, kw_only=True)
class PhraseQuery(Query):
    """
    Matches documents containing ``terms`` at their relative positions.

    ``slop`` is the number of positional moves allowed between the
    phrase as given and the terms as found.  Positions that no term
    occupies are gaps the match must respect.
    """

    field: str
    terms: tuple[PhraseTerm, ...] = ()
    slop: int = 0

    @property
    def positions(self) -> list[int]:
        return [t.position for t in self.terms]

    @property
    def texts(self) -> list[str]:
        return [t.text for t in self.terms]

    def to_dict(self) -> dict[str, Any]:
        return {
            "phrase": {
                self.field: {
                    "terms": [
                        {"text": t.text, "position": t.position} for t in self.terms
                    ],
                    "slop": self.slop,
                    "boost": self.boost,
                }
            }
        }

    def _syntax(self) -> str:
        slots: list[str | None] = []
        for t in self.terms:
            if t.position >= len(slots):
                slots.extend([None] * (t.position + 1 - len(slots)))
            current = slots[t.position]
            slots[t.position] = t.text if current is None else f"{current}|{t.text}"
        phrase = " ".join("?" if s is None else s for s in slots)
        suffix = f"~{self.slop}" if self.slop else ""
        return f'{self.field}:"{phrase}"{suffix}'
