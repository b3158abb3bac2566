"""Choice list provider whose choices are computed by a script."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable, List, Optional

from pydantic import ConfigDict, Field

from extensible_choice.core.errors import (
    ChoiceProviderError,
    InvalidResultTypeError,
    NoScriptResultError,
    ScriptEvaluationError,
)
from extensible_choice.core.normalize import choice_to_string
from extensible_choice.core.scripting import PythonScriptEvaluator

from .base import ChoiceListProvider

logger = logging.getLogger(__name__)


def run_script(script_text: str, evaluator: Callable[[str], Any]) -> List[str]:
    """
    Evaluate a choice script and convert its result to a list of choices.

    Args:
        script_text: Script source handed to the evaluator
        evaluator: Callable evaluating the script and returning its result

    Returns:
        Choices in the order produced by the script, ``None`` elements dropped

    Raises:
        ScriptEvaluationError: If the evaluator raised
        NoScriptResultError: If the script produced no result
        InvalidResultTypeError: If the result is not a sequence of values
    """
    try:
        out = evaluator(script_text)
    except Exception as exc:
        raise ScriptEvaluationError(cause=exc) from exc

    if out is None:
        raise NoScriptResultError()

    # order decides the default, so unordered collections are rejected
    if isinstance(out, (str, bytes, bytearray)) or not isinstance(out, Sequence):
        raise InvalidResultTypeError(type(out))

    try:
        return [choice_to_string(item) for item in out if item is not None]
    except Exception as exc:
        raise ScriptEvaluationError(cause=exc) from exc


class ScriptChoiceListProvider(ChoiceListProvider):
    """Choices produced by evaluating ``script_text`` on every call."""

    script_text: str = ""
    default_choice: Optional[str] = None
    evaluator: Callable[[str], Any] = Field(default_factory=PythonScriptEvaluator, exclude=True, repr=False)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def run(self) -> List[str]:
        """Evaluate the script, raising on any failure."""
        return run_script(self.script_text, self.evaluator)

    def list_choices_strict(self) -> List[str]:
        return self.run()

    def list_choices(self) -> List[str]:
        try:
            return self.run()
        except NoScriptResultError:
            logger.warning("Choice script returned no result; treating it as no choices")
        except ChoiceProviderError:
            logger.warning("Failed to execute script", exc_info=True)
        return []

    def declared_default(self) -> Optional[str]:
        return self.default_choice

    def describe(self) -> str:
        first_line = (self.script_text or "").strip().splitlines()[:1]
        preview = first_line[0] if first_line else "<empty>"
        return f"script: {preview}"


__all__ = ["ScriptChoiceListProvider", "run_script"]
