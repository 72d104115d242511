"""Unit tests for embedded JSON recovery."""

from __future__ import annotations

from realtime_proxy.handlers.http.gemini import normalize_semantics
from realtime_proxy.helpers.json_extract import extract_first_json_object, parse_json_object


def test_extracts_object_wrapped_in_prose() -> None:
    text = 'Sure! Here it is: {"intent": "music_play", "slots": {}} Hope that helps.'
    assert extract_first_json_object(text) == '{"intent": "music_play", "slots": {}}'


def test_braces_inside_strings_do_not_end_the_object() -> None:
    text = '{"brief": "a } b { c", "slots": {"x": "\\"}"}} trailing'
    assert extract_first_json_object(text) == '{"brief": "a } b { c", "slots": {"x": "\\"}"}}'


def test_unbalanced_or_missing_object() -> None:
    assert extract_first_json_object('{"intent": "x"') is None
    assert extract_first_json_object("no json here") is None
    assert extract_first_json_object("") is None
    assert extract_first_json_object(None) is None


def test_parse_json_object_rejects_non_objects() -> None:
    assert parse_json_object("[1, 2]") is None
    assert parse_json_object("42") is None
    assert parse_json_object("{broken") is None
    assert parse_json_object('```json\n{"a": 1}\n```') == {"a": 1}


def test_normalize_semantics_coerces_fields() -> None:
    result = normalize_semantics('{"intent": " Calendar_Add ", "slots": [], "confidence": "high"}')

    assert result["intent"] == "calendar_add"
    assert result["slots"] == {}
    assert result["confidence"] == 0.0
    assert result["brief"] == ""


def test_normalize_semantics_missing_intent_is_unknown() -> None:
    result = normalize_semantics('{"slots": {"title": "會議"}, "confidence": 0.4}')

    assert result["intent"] == "unknown"
    assert result["slots"] == {"title": "會議"}
    assert result["confidence"] == 0.4
