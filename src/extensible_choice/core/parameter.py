from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from extensible_choice.core.errors import DefaultNotInChoicesError, ValueNotInChoicesError
from extensible_choice.core.normalize import trim_name
from extensible_choice.core.providers.base import ChoiceListProvider

logger = logging.getLogger(__name__)


class ParameterValue(BaseModel):
    """A resolved parameter value handed to a build."""

    name: Optional[str]
    value: str
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ChoiceParameterDefinition(BaseModel):
    """
    A build parameter whose choices come from a pluggable provider.

    The provider is queried on every call; nothing is cached, so dynamic
    providers are re-evaluated each time a default or a value is resolved.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    provider: Optional[ChoiceListProvider] = None
    editable: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _trim(cls, v: Optional[str]) -> Optional[str]:
        return trim_name(v)

    def choices(self) -> List[str]:
        """Return a fresh snapshot of the provider's choices for display."""
        if self.provider is None:
            return []
        return list(self.provider.list_choices() or [])

    def strict_choices(self) -> List[str]:
        """Return a fresh snapshot of the choices, raising provider failures."""
        if self.provider is None:
            return []
        return list(self.provider.list_choices_strict() or [])

    def declared_default(self) -> Optional[str]:
        if self.provider is None:
            return None
        return self.provider.declared_default()

    def resolve_default(self, choices: Optional[List[str]] = None) -> Optional[str]:
        """
        Decide which value is presented as the default.

        Args:
            choices: Snapshot to resolve against; when omitted the provider is
                queried strictly, so a failing provider raises

        Returns:
            ``None`` when there are no choices, the first choice when no default
            is declared, otherwise the declared default

        Raises:
            DefaultNotInChoicesError: If the parameter is not editable and the
                declared default is not one of the choices
            ChoiceProviderError: If the provider fails while being queried
        """
        if choices is None:
            choices = self.strict_choices()
        if not choices:
            return None

        declared = self.declared_default()
        if declared is None:
            return choices[0]

        if self.editable or declared in choices:
            return declared

        raise DefaultNotInChoicesError(self.name, declared, choices)

    def accept(self, submitted: str) -> str:
        """
        Validate a submitted value, returning it unchanged.

        Raises:
            ValueNotInChoicesError: If the parameter is not editable and the
                value is not exactly one of the choices
            ChoiceProviderError: If the provider fails while being queried
        """
        if self.editable:
            return submitted

        choices = self.strict_choices()
        if submitted in choices:
            return submitted

        logger.debug("Rejected value %r for parameter %r; choices: %s", submitted, self.name, choices)
        raise ValueNotInChoicesError(self.name, submitted, choices)

    def default_parameter_value(self) -> Optional[ParameterValue]:
        value = self.resolve_default()
        if value is None:
            return None
        return ParameterValue(name=self.name, value=value, description=self.description)

    def create_value(self, submitted: str) -> ParameterValue:
        return ParameterValue(name=self.name, value=self.accept(submitted), description=self.description)


__all__ = ["ChoiceParameterDefinition", "ParameterValue"]
