"""Tests for the script-backed choice list provider."""

import logging
import threading

import pytest

from extensible_choice.core.errors import (
    ChoiceProviderError,
    InvalidResultTypeError,
    NoScriptResultError,
    ScriptEvaluationError,
)
from extensible_choice.core.parameter import ChoiceParameterDefinition
from extensible_choice.core.providers.script import ScriptChoiceListProvider, run_script
from extensible_choice.core.scripting import PythonScriptEvaluator


def returning(value):
    def _evaluate(script_text):
        return value

    return _evaluate


def failing(exc):
    def _evaluate(script_text):
        raise exc

    return _evaluate


class TestRunScript:
    def test_returns_strings_in_order(self):
        assert run_script("ignored", returning(["b", "a", "b"])) == ["b", "a", "b"]

    def test_none_elements_are_dropped(self):
        assert run_script("ignored", returning(["a", None, "b"])) == ["a", "b"]

    def test_elements_are_converted_to_strings(self):
        assert run_script("ignored", returning([1, 2.5, True, "x"])) == ["1", "2.5", "true", "x"]

    def test_tuples_are_sequences(self):
        assert run_script("ignored", returning(("a", "b"))) == ["a", "b"]

    @pytest.mark.parametrize("value", [{"b", "a", "c"}, frozenset({"a"}), (c for c in "xy")])
    def test_unordered_or_lazy_results_are_rejected(self, value):
        with pytest.raises(InvalidResultTypeError):
            run_script("ignored", returning(value))

    def test_empty_list_is_not_an_error(self):
        assert run_script("ignored", returning([])) == []

    def test_evaluator_failure(self):
        with pytest.raises(ScriptEvaluationError) as excinfo:
            run_script("ignored", failing(RuntimeError("boom")))
        assert isinstance(excinfo.value.cause, RuntimeError)
        assert "boom" in str(excinfo.value)

    def test_none_result(self):
        with pytest.raises(NoScriptResultError):
            run_script("ignored", returning(None))

    @pytest.mark.parametrize("value", ["abc", 42, {"a": 1}, b"bytes", object()])
    def test_non_sequence_result(self, value):
        with pytest.raises(InvalidResultTypeError, match="script must return a list of strings"):
            run_script("ignored", returning(value))

    def test_errors_share_a_provider_base(self):
        for exc_type in (ScriptEvaluationError, InvalidResultTypeError, NoScriptResultError):
            assert issubclass(exc_type, ChoiceProviderError)


class TestListChoices:
    """Display mode never lets a provider failure escape."""

    def test_successful_script(self):
        provider = ScriptChoiceListProvider(script_text="s", evaluator=returning(["a", "b"]))
        assert provider.list_choices() == ["a", "b"]

    def test_failed_script_degrades_to_empty(self, caplog):
        provider = ScriptChoiceListProvider(script_text="s", evaluator=failing(SyntaxError("bad")))
        with caplog.at_level(logging.WARNING, logger="extensible_choice.core.providers.script"):
            assert provider.list_choices() == []
        assert "Failed to execute script" in caplog.text

    def test_invalid_type_degrades_to_empty_but_run_raises(self):
        provider = ScriptChoiceListProvider(script_text="s", evaluator=returning("not a list"))
        assert provider.list_choices() == []
        with pytest.raises(InvalidResultTypeError):
            provider.run()

    def test_no_result_is_logged_distinctly(self, caplog):
        provider = ScriptChoiceListProvider(script_text="s", evaluator=returning(None))
        with caplog.at_level(logging.WARNING, logger="extensible_choice.core.providers.script"):
            assert provider.list_choices() == []
        assert "no result" in caplog.text

    def test_declared_default(self):
        assert ScriptChoiceListProvider(script_text="s", default_choice="b").declared_default() == "b"
        assert ScriptChoiceListProvider(script_text="s").declared_default() is None

    def test_script_is_evaluated_on_every_call(self):
        seen = []

        def evaluate(script_text):
            seen.append(script_text)
            return [str(len(seen))]

        provider = ScriptChoiceListProvider(script_text="count", evaluator=evaluate)
        assert provider.list_choices() == ["1"]
        assert provider.list_choices() == ["2"]
        assert seen == ["count", "count"]


class TestWithParameter:
    def test_failing_script_surfaces_when_validating(self):
        provider = ScriptChoiceListProvider(script_text="s", evaluator=failing(RuntimeError("down")))
        param = ChoiceParameterDefinition(name="P", provider=provider, editable=False)
        assert param.choices() == []
        with pytest.raises(ScriptEvaluationError, match="down"):
            param.accept("anything")
        with pytest.raises(ScriptEvaluationError):
            param.resolve_default()

    def test_failing_script_surfaces_for_editable_default(self):
        provider = ScriptChoiceListProvider(script_text="s", default_choice="eu", evaluator=failing(RuntimeError("down")))
        param = ChoiceParameterDefinition(name="P", provider=provider, editable=True)
        assert param.accept("anything") == "anything"
        with pytest.raises(ChoiceProviderError):
            param.default_parameter_value()

    def test_invalid_result_surfaces_when_validating(self):
        provider = ScriptChoiceListProvider(script_text="s", evaluator=returning({"a", "b"}))
        param = ChoiceParameterDefinition(name="P", provider=provider)
        assert param.choices() == []
        with pytest.raises(InvalidResultTypeError):
            param.accept("a")

    def test_display_snapshot_keeps_failures_tolerant(self):
        provider = ScriptChoiceListProvider(script_text="s", default_choice="eu", evaluator=failing(RuntimeError("down")))
        param = ChoiceParameterDefinition(name="P", provider=provider, editable=True)
        assert param.resolve_default(param.choices()) is None

    def test_python_script_choices(self):
        provider = ScriptChoiceListProvider(script_text="['value1', 'value2', 'value3']", default_choice="value2")
        param = ChoiceParameterDefinition(name="P", provider=provider, editable=False)
        assert param.resolve_default() == "value2"
        assert param.accept("value3") == "value3"


class TestPythonScriptEvaluator:
    def test_trailing_expression_is_the_result(self):
        evaluate = PythonScriptEvaluator()
        assert evaluate("items = ['a', 'b']\nitems + ['c']") == ["a", "b", "c"]

    def test_result_variable_is_used_without_trailing_expression(self):
        evaluate = PythonScriptEvaluator()
        assert evaluate("result = []\nfor i in range(3):\n    result.append(f'v{i}')\n") == ["v0", "v1", "v2"]

    def test_no_result(self):
        assert PythonScriptEvaluator()("x = 1") is None
        assert PythonScriptEvaluator()("") is None

    def test_bindings_are_available(self):
        evaluate = PythonScriptEvaluator(bindings={"branches": ["main", "dev"]})
        assert evaluate("sorted(branches)") == ["dev", "main"]

    def test_syntax_error_propagates(self):
        with pytest.raises(SyntaxError):
            PythonScriptEvaluator()("[1, 2")

    def test_each_call_gets_a_fresh_namespace(self):
        evaluate = PythonScriptEvaluator()
        evaluate("leaked = 1")
        with pytest.raises(NameError):
            evaluate("leaked")

    def test_bindings_are_not_mutated(self):
        bindings = {"values": ["a"]}
        evaluate = PythonScriptEvaluator(bindings=bindings)
        evaluate("values = ['b']")
        assert evaluate("values") == ["a"]

    def test_concurrent_evaluations_are_isolated(self):
        provider = ScriptChoiceListProvider(script_text="n = 0\nfor i in range(1000):\n    n += 1\n[str(n)]")
        results = []

        def worker():
            results.append(provider.list_choices())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [["1000"]] * 8
