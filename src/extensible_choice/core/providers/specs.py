"""Pydantic specs for providers declared in job YAML files.

Built-in provider types are registered on the global provider registry when
this module is imported.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import ChoiceListProvider
from .forms import decode_default_choice
from .registry import Evaluator, get_provider_registry
from .script import ScriptChoiceListProvider
from .textarea import TextareaChoiceListProvider


class _BaseSpec(BaseModel):
    """Base settings shared by all provider spec models."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ProviderSpec(_BaseSpec):
    type: str
    default_choice: Optional[str] = None

    @field_validator("default_choice", mode="before")
    @classmethod
    def _decode_default(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return decode_default_choice(str(value))


class TextareaProviderSpec(ProviderSpec):
    type: Literal["textarea"]
    choices: str = ""

    @field_validator("choices", mode="before")
    @classmethod
    def _join_lines(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, list):
            return "\n".join("" if item is None else str(item) for item in value)
        return value


class ScriptProviderSpec(ProviderSpec):
    type: Literal["script"]
    script: str = Field(min_length=1)


def _build_textarea(spec: TextareaProviderSpec, _evaluator: Optional[Evaluator]) -> ChoiceListProvider:
    return TextareaChoiceListProvider(choice_list_text=spec.choices, default_choice=spec.default_choice)


def _build_script(spec: ScriptProviderSpec, evaluator: Optional[Evaluator]) -> ChoiceListProvider:
    if evaluator is None:
        return ScriptChoiceListProvider(script_text=spec.script, default_choice=spec.default_choice)
    return ScriptChoiceListProvider(
        script_text=spec.script,
        default_choice=spec.default_choice,
        evaluator=evaluator,
    )


def parse_provider_spec(data: Any) -> BaseModel:
    if isinstance(data, ProviderSpec):
        return data
    if not isinstance(data, Mapping):
        raise ValueError("Provider spec must be a mapping")
    return get_provider_registry().parse_spec(dict(data))


def build_provider(spec: Any, evaluator: Optional[Evaluator] = None) -> ChoiceListProvider:
    return get_provider_registry().build_provider(spec, evaluator)


def _register_builtin_types() -> None:
    registry = get_provider_registry()
    registry.register("textarea", TextareaProviderSpec, _build_textarea)
    registry.register("script", ScriptProviderSpec, _build_script)


# Register built-in types on module load
_register_builtin_types()


__all__ = [
    "ProviderSpec",
    "ScriptProviderSpec",
    "TextareaProviderSpec",
    "build_provider",
    "parse_provider_spec",
]
