"""
Text analyzers.

An analyzer turns raw text into the sequence of normalized terms that
an index stores for a field.  Conditions use them to normalize free
text before building a term, so that a query value meets the indexed
form of the same word (``"Queries"`` -> ``"query"`` under ``english``).

New analyzers are added by subclassing :class:`Analyzer` and passing
them to :class:`~search_conditions.schema.Schema`.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from .exceptions import AnalysisError

_WORD_RE = re.compile(r"\w+", re.UNICODE)
_LETTERS_RE = re.compile(r"[^\W\d_]+", re.UNICODE)

ENGLISH_STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "but", "by", "for",
        "if", "in", "into", "is", "it", "no", "not", "of", "on", "or",
        "such", "that", "the", "their", "then", "there", "these", "they",
        "this", "to", "was", "will", "with",
    }
)  # fmt: skip


class Analyzer(ABC):
    """Strategy interface for turning raw text into index terms."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name the analyzer is registered under in a schema mapping."""
        ...

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Return the normalized terms of *text*, in order."""
        ...


class KeywordAnalyzer(Analyzer):
    """Emits the whole input as a single, untouched term."""

    @property
    def name(self) -> str:
        return "keyword"

    def tokenize(self, text: str) -> list[str]:
        return [text] if text else []


class WhitespaceAnalyzer(Analyzer):
    """Splits on whitespace. No case folding."""

    @property
    def name(self) -> str:
        return "whitespace"

    def tokenize(self, text: str) -> list[str]:
        return text.split()


class SimpleAnalyzer(Analyzer):
    """Runs of letters, lowercased. Digits and punctuation split terms."""

    @property
    def name(self) -> str:
        return "simple"

    def tokenize(self, text: str) -> list[str]:
        return [m.group(0).lower() for m in _LETTERS_RE.finditer(text)]


class StandardAnalyzer(Analyzer):
    """Unicode word tokens, lowercased, with optional stop-word removal."""

    def __init__(self, stop_words: frozenset[str] | None = None) -> None:
        self.stop_words = stop_words or frozenset()

    @property
    def name(self) -> str:
        return "standard"

    def tokenize(self, text: str) -> list[str]:
        tokens = [m.group(0).lower() for m in _WORD_RE.finditer(text)]
        return [t for t in tokens if t not in self.stop_words]


class EnglishAnalyzer(StandardAnalyzer):
    """Standard tokenization, English stop words and minimal plural stemming."""

    def __init__(self, stop_words: frozenset[str] | None = None) -> None:
        super().__init__(ENGLISH_STOP_WORDS if stop_words is None else stop_words)

    @property
    def name(self) -> str:
        return "english"

    def tokenize(self, text: str) -> list[str]:
        return [stem_plural(t) for t in super().tokenize(text)]


def stem_plural(word: str) -> str:
    """
    Strip a trailing plural ``s`` from *word*.

    ``ies`` becomes ``y`` (``queries`` -> ``query``), while endings
    that are rarely plurals (``ss``, ``us``, ``aes``/``oes``...) are kept.
    """
    n = len(word)
    if n < 3 or word[-1] != "s":
        return word
    before = word[-2]
    if before in ("u", "s"):
        return word
    if before == "e":
        if n > 3 and word[-3] == "i" and word[-4] not in ("a", "e"):
            return word[:-3] + "y"
        if word[-3] in ("i", "a", "o", "e"):
            return word
    return word[:-1]


def build_default_analyzers() -> dict[str, Analyzer]:
    """Create a fresh name -> analyzer mapping with all built-in analyzers."""
    analyzers: list[Analyzer] = [
        StandardAnalyzer(),
        EnglishAnalyzer(),
        SimpleAnalyzer(),
        WhitespaceAnalyzer(),
        KeywordAnalyzer(),
    ]
    return {a.name: a for a in analyzers}


def analyze_term(analyzer: Analyzer, field: str, text: str) -> str | None:
    """
    Analyze *text* into exactly one term.

    Returns ``None`` when the analyzer produces no terms (e.g. the text
    was a single stop word).

    Raises:
        AnalysisError: If the analyzer produces more than one term.
    """
    terms = analyzer.tokenize(text)
    if not terms:
        return None
    if len(terms) > 1:
        raise AnalysisError(field, text, terms)
    return terms[0]
