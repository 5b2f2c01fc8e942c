"""Shared fixtures for condition compiler tests."""

from __future__ import annotations

import pytest

from search_conditions import Schema
from search_conditions.compilers import build_default_registry


@pytest.fixture
def schema() -> Schema:
    """A schema with text, keyword-analyzed string and numeric fields."""
    return Schema.from_dict(
        {
            "default_analyzer": "standard",
            "fields": {
                "name": {"type": "text"},
                "title": {"type": "text"},
                "body": {"type": "text", "analyzer": "english"},
                "code": {"type": "string", "analyzer": "keyword"},
                "age": {"type": "integer"},
                "price": {"type": "double"},
                "active": {"type": "boolean"},
            },
        }
    )


@pytest.fixture
def resolver(schema: Schema):
    return schema.resolve_field_type


@pytest.fixture
def analyzer(schema: Schema):
    return schema.analyze


@pytest.fixture
def registry():
    """Default compiler registry."""
    return build_default_registry()


class RecordingAnalyzer:
    """Analyzer double that lowercases and records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def __call__(self, field: str, text: str) -> str | None:
        self.calls.append((field, text))
        return text.lower() or None


@pytest.fixture
def recording_analyzer() -> RecordingAnalyzer:
    return RecordingAnalyzer()
