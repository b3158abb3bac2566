from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from extensible_choice.core.parameter import ChoiceParameterDefinition


class JobDefinition(BaseModel):
    """A build job and the choice parameters it exposes."""

    name: str
    description: Optional[str] = None
    parameters: List[ChoiceParameterDefinition] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("job name cannot be empty")
        return v

    @field_validator("parameters")
    @classmethod
    def _unique_names(cls, v: List[ChoiceParameterDefinition]) -> List[ChoiceParameterDefinition]:
        seen = set()
        for param in v:
            if param.name in seen:
                raise ValueError(f"duplicate parameter name: {param.name}")
            seen.add(param.name)
        return v

    def get_parameter(self, name: str) -> ChoiceParameterDefinition:
        for param in self.parameters:
            if param.name == name:
                return param
        available = ", ".join(str(p.name) for p in self.parameters)
        raise KeyError(f"Unknown parameter: {name}. Available: {available}")

    def parameter_names(self) -> List[str]:
        return [p.name for p in self.parameters if p.name is not None]
