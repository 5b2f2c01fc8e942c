"""Tests for phrase condition compilation."""

from __future__ import annotations

import pytest

from search_conditions import (
    FieldType,
    MissingFieldError,
    MissingValueError,
    OutOfRangeParameterError,
    PhraseCondition,
    PhraseQuery,
    PhraseTerm,
    UnsupportedFieldTypeError,
)


def test_null_entry_keeps_its_position(resolver, analyzer):
    condition = PhraseCondition(field="title", values=["quick", None, "fox"], slop=1)

    query = condition.compile(resolver, analyzer)

    assert isinstance(query, PhraseQuery)
    assert query.field == "title"
    assert query.terms == (PhraseTerm("quick", 0), PhraseTerm("fox", 2))
    assert query.slop == 1
    assert query.boost == 1.0
    assert str(query) == 'title:"quick ? fox"~1'


def test_values_are_analyzed(resolver, analyzer):
    condition = PhraseCondition(field="title", values=["Quick", "BROWN", "Fox"])

    query = condition.compile(resolver, analyzer)

    assert query.texts == ["quick", "brown", "fox"]
    assert query.positions == [0, 1, 2]


def test_entry_analyzed_to_nothing_keeps_its_position(resolver, analyzer):
    # "the" is dropped by the english analyzer of "body"
    condition = PhraseCondition(field="body", values=["jumps", "the", "dogs"])

    query = condition.compile(resolver, analyzer)

    assert query.terms == (PhraseTerm("jump", 0), PhraseTerm("dog", 2))


def test_analyzer_is_called_for_present_entries_only(resolver, recording_analyzer):
    condition = PhraseCondition(field="Title", values=[None, "A", None, "B"])

    query = condition.compile(resolver, recording_analyzer)

    assert recording_analyzer.calls == [("title", "A"), ("title", "B")]
    assert query.positions == [1, 3]


def test_empty_values_build_empty_phrase(resolver, analyzer):
    query = PhraseCondition(field="title", values=[]).compile(resolver, analyzer)
    assert query.terms == ()


def test_default_slop(resolver, analyzer):
    condition = PhraseCondition(field="title", values=["a"])
    assert condition.slop == 0
    assert condition.compile(resolver, analyzer).slop == 0


def test_unknown_field_is_treated_as_text(resolver, analyzer):
    query = PhraseCondition(field="summary", values=["Big", "Data"]).compile(
        resolver, analyzer
    )
    assert query.texts == ["big", "data"]


def test_boost(resolver, analyzer):
    base = PhraseCondition(field="title", values=["a", "b"]).compile(
        resolver, analyzer
    )
    boosted = PhraseCondition(field="title", values=["a", "b"], boost=2.0).compile(
        resolver, analyzer
    )
    assert boosted.boost == 2 * base.boost


@pytest.mark.parametrize("field", [None, "", " "])
def test_missing_field(resolver, analyzer, field):
    with pytest.raises(MissingFieldError):
        PhraseCondition(field=field, values=["a"], slop=-1).compile(resolver, analyzer)


def test_missing_values(resolver, analyzer):
    with pytest.raises(MissingValueError, match="Field values required") as exc_info:
        PhraseCondition(field="title").compile(resolver, analyzer)
    assert exc_info.value.parameter == "values"


def test_negative_slop(resolver, analyzer):
    condition = PhraseCondition(field="title", values=["a"], slop=-1)
    with pytest.raises(OutOfRangeParameterError, match="Slop must be positive"):
        condition.compile(resolver, analyzer)


def test_numeric_field_is_unsupported(resolver, analyzer):
    condition = PhraseCondition(field="price", values=["9.99"])
    with pytest.raises(UnsupportedFieldTypeError, match="mapping is defined") as exc:
        condition.compile(resolver, analyzer)
    assert exc.value.field_type is FieldType.DOUBLE
    assert "double" in str(exc.value)


def test_resolver_may_answer_with_type_names(analyzer):
    resolver = {"title": "text", "age": "integer"}.get

    query = PhraseCondition(field="title", values=["quick", "fox"]).compile(
        resolver, analyzer
    )
    assert query.texts == ["quick", "fox"]

    with pytest.raises(UnsupportedFieldTypeError, match="integer"):
        PhraseCondition(field="age", values=["42"]).compile(resolver, analyzer)
