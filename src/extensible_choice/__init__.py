"""Extensible choice parameters: provider-backed choice lists for build jobs."""

from extensible_choice.core.errors import (
    ChoiceParameterError,
    ChoiceProviderError,
    DefaultNotInChoicesError,
    InvalidResultTypeError,
    NoScriptResultError,
    ScriptEvaluationError,
    ValueNotInChoicesError,
)
from extensible_choice.core.parameter import ChoiceParameterDefinition, ParameterValue
from extensible_choice.core.providers import (
    ChoiceListProvider,
    ScriptChoiceListProvider,
    TextareaChoiceListProvider,
)

__all__ = [
    "ChoiceListProvider",
    "ChoiceParameterDefinition",
    "ChoiceParameterError",
    "ChoiceProviderError",
    "DefaultNotInChoicesError",
    "InvalidResultTypeError",
    "NoScriptResultError",
    "ParameterValue",
    "ScriptChoiceListProvider",
    "ScriptEvaluationError",
    "TextareaChoiceListProvider",
    "ValueNotInChoicesError",
]
