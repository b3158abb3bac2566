"""Tests for the default-choice selector and the script check used while authoring."""

from extensible_choice.core.providers.forms import (
    NO_DEFAULT_CHOICE,
    NO_DEFAULT_LABEL,
    check_script,
    decode_default_choice,
    fill_default_choice_items,
)
from extensible_choice.core.scripting import PythonScriptEvaluator


def _broken(script_text):
    raise RuntimeError("interpreter unavailable")


def test_decode_default_choice():
    assert decode_default_choice(NO_DEFAULT_CHOICE) is None
    assert decode_default_choice(None) is None
    assert decode_default_choice("value2") == "value2"
    assert decode_default_choice("") == ""


def test_default_items_start_with_no_default_entry():
    items = fill_default_choice_items("['a', 'b']", PythonScriptEvaluator())

    assert [(item.label, item.value) for item in items] == [
        (NO_DEFAULT_LABEL, NO_DEFAULT_CHOICE),
        ("a", "a"),
        ("b", "b"),
    ]


def test_default_items_degrade_on_failure():
    items = fill_default_choice_items("anything", _broken)

    assert [item.value for item in items] == [NO_DEFAULT_CHOICE]


def test_default_items_for_invalid_result_type():
    items = fill_default_choice_items("'just a string'", PythonScriptEvaluator())

    assert len(items) == 1


class TestCheckScript:
    def test_ok_joins_choices(self):
        result = check_script("['a', 'b', None, 3]", PythonScriptEvaluator())

        assert result.ok
        assert result.message == "a\nb\n3"

    def test_evaluation_failure_is_reported(self):
        result = check_script("[1, 2", PythonScriptEvaluator())

        assert not result.ok
        assert result.message.startswith("Failed to execute script")
        assert "SyntaxError" in result.message

    def test_null_result_is_reported(self):
        result = check_script("x = 1", PythonScriptEvaluator())

        assert not result.ok
        assert result.message == "Script returned null."

    def test_invalid_type_is_reported(self):
        result = check_script("{'a': 1}", PythonScriptEvaluator())

        assert not result.ok
        assert "script must return a list of strings" in result.message
