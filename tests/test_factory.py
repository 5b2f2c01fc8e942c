"""Tests for ConditionFactory (from_dict, from_json, validate)."""

from __future__ import annotations

import json

import pytest

from search_conditions import (
    ConditionFactory,
    ConditionParseError,
    FuzzyCondition,
    OutOfRangeParameterError,
    PhraseCondition,
    RegexpCondition,
)

# -- from_dict ---------------------------------------------------------------


def test_from_dict_fuzzy():
    condition = ConditionFactory.from_dict(
        {"type": "fuzzy", "field": "Name", "value": "jon", "maxEdits": 1}
    )
    assert isinstance(condition, FuzzyCondition)
    assert condition.field == "name"
    assert condition.max_edits == 1
    assert condition.prefix_length == 0


def test_from_dict_regexp_with_boost():
    condition = ConditionFactory.from_dict(
        {"type": "regexp", "field": "code", "value": "AB.*", "boost": 2}
    )
    assert isinstance(condition, RegexpCondition)
    assert condition.boost == 2.0


def test_from_dict_type_is_case_insensitive():
    condition = ConditionFactory.from_dict({"type": "PHRASE", "field": "t", "values": []})
    assert isinstance(condition, PhraseCondition)


def test_from_dict_ignores_unknown_keys():
    condition = ConditionFactory.from_dict(
        {"type": "regexp", "field": "code", "value": "x", "flags": "ALL"}
    )
    assert condition.to_dict() == {
        "type": "regexp",
        "boost": 1.0,
        "field": "code",
        "value": "x",
    }


def test_from_dict_null_parameters_use_defaults():
    condition = ConditionFactory.from_dict(
        {
            "type": "fuzzy",
            "field": "name",
            "value": "jon",
            "boost": None,
            "maxEdits": None,
            "maxExpansions": None,
        }
    )
    assert condition.boost == 1.0
    assert condition.max_edits == 2
    assert condition.max_expansions == 50


def test_from_dict_null_slop_uses_default():
    condition = ConditionFactory.from_dict(
        {"type": "phrase", "field": "title", "values": [], "slop": None}
    )
    assert condition.slop == 0


def test_from_dict_unknown_type_suggests():
    with pytest.raises(ConditionParseError) as exc_info:
        ConditionFactory.from_dict({"type": "fuzy", "field": "name"})
    assert exc_info.value.suggestions == ["fuzzy"]
    assert "Did you mean: fuzzy?" in str(exc_info.value)
    assert exc_info.value.path == "type"


def test_from_dict_missing_type():
    with pytest.raises(ConditionParseError, match="type"):
        ConditionFactory.from_dict({"field": "name", "value": "jon"})


def test_from_dict_not_a_dict():
    with pytest.raises(ConditionParseError, match="object"):
        ConditionFactory.from_dict(["fuzzy"])  # type: ignore[arg-type]


def test_from_dict_wrong_parameter_type():
    with pytest.raises(ConditionParseError) as exc_info:
        ConditionFactory.from_dict(
            {"type": "fuzzy", "field": "name", "value": "jon", "maxEdits": "lots"}
        )
    assert exc_info.value.path == "maxEdits"
    assert "Invalid 'fuzzy' condition" in str(exc_info.value)


def test_from_dict_defers_range_checks_to_compile(resolver, analyzer):
    condition = ConditionFactory.from_dict(
        {"type": "fuzzy", "field": "name", "value": "jon", "maxEdits": 3}
    )
    with pytest.raises(OutOfRangeParameterError):
        condition.compile(resolver, analyzer)


# -- from_json ---------------------------------------------------------------


def test_from_json_phrase_with_nulls(resolver, analyzer):
    payload = json.dumps(
        {"type": "phrase", "field": "title", "values": ["quick", None, "fox"], "slop": 1}
    )
    condition = ConditionFactory.from_json(payload)

    assert condition.values == ("quick", None, "fox")
    assert condition.compile(resolver, analyzer).positions == [0, 2]


def test_from_json_invalid_json():
    with pytest.raises(ConditionParseError, match="Invalid JSON"):
        ConditionFactory.from_json("not json {")


def test_from_json_non_object():
    with pytest.raises(ConditionParseError, match="object"):
        ConditionFactory.from_json('"just a string"')


# -- validate ----------------------------------------------------------------


def test_validate_valid_document():
    assert ConditionFactory.validate({"type": "regexp", "field": "a", "value": "b"}) == []


def test_validate_collects_problem():
    errors = ConditionFactory.validate({"type": "wildcard", "field": "a"})
    assert len(errors) == 1
    assert errors[0].startswith("type:")


def test_to_dict_round_trip():
    original = PhraseCondition(field="title", values=["a", None], slop=2, boost=0.5)
    assert ConditionFactory.from_dict(original.to_dict()) == original
