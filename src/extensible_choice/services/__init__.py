"""Service Layer: build-time orchestration over loaded jobs."""

from __future__ import annotations

from .build_service import BuildService, ParameterForm, UnknownParameterError

__all__ = [
    "BuildService",
    "ParameterForm",
    "UnknownParameterError",
]
