"""Error taxonomy for choice providers and choice parameters."""

from __future__ import annotations

from typing import Optional, Sequence


class ChoiceParameterError(Exception):
    """Base class for every error raised by the choice engine."""


class ChoiceProviderError(ChoiceParameterError):
    """A provider could not produce its list of choices."""


class ScriptEvaluationError(ChoiceProviderError):
    """The script evaluator raised while running a choice script."""

    def __init__(self, message: str = "Failed to execute script", *, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {type(self.cause).__name__}: {self.cause}"

    def __str__(self) -> str:
        return self._build_message()


class InvalidResultTypeError(ChoiceProviderError, TypeError):
    """The script ran but did not produce a sequence of values."""

    def __init__(self, result_type: type):
        self.result_type = result_type
        super().__init__(f"script must return a list of strings, got {result_type.__name__}")


class NoScriptResultError(ChoiceProviderError):
    """The script ran but produced no result at all (as opposed to an empty list)."""

    def __init__(self) -> None:
        super().__init__("script returned no result")


class DefaultNotInChoicesError(ChoiceParameterError, ValueError):
    """A non-editable parameter declares a default outside of its choices."""

    def __init__(self, parameter: Optional[str], default: str, choices: Sequence[str]):
        self.parameter = parameter
        self.default = default
        self.choices = list(choices)
        super().__init__(
            f"default value {default!r} of parameter {parameter!r} is not one of the allowed choices"
        )


class ValueNotInChoicesError(ChoiceParameterError, ValueError):
    """A non-editable parameter was given a value outside of its choices."""

    def __init__(self, parameter: Optional[str], value: str, choices: Sequence[str]):
        self.parameter = parameter
        self.value = value
        self.choices = list(choices)
        super().__init__(
            f"submitted value {value!r} for parameter {parameter!r} is not one of the allowed choices"
        )


__all__ = [
    "ChoiceParameterError",
    "ChoiceProviderError",
    "DefaultNotInChoicesError",
    "InvalidResultTypeError",
    "NoScriptResultError",
    "ScriptEvaluationError",
    "ValueNotInChoicesError",
]
