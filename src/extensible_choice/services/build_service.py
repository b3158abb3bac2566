"""Build Service: resolves parameter values for a build and describes parameter forms."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

from extensible_choice.core.errors import DefaultNotInChoicesError
from extensible_choice.core.jobs.job import JobDefinition
from extensible_choice.core.parameter import ParameterValue
from extensible_choice.core.registries.job_registry import JobRegistry
from extensible_choice.utils.logging import log_calls

logger = logging.getLogger(__name__)


class UnknownParameterError(KeyError):
    """A build was requested with a parameter the job does not define."""

    def __init__(self, job_name: str, names: List[str]):
        self.job_name = job_name
        self.names = names
        super().__init__(f"Job {job_name} has no parameter(s): {', '.join(names)}")

    def __str__(self) -> str:
        return self.args[0]


class ParameterForm(BaseModel):
    """What a form needs to render one parameter."""

    name: Optional[str]
    description: Optional[str] = None
    editable: bool = False
    choices: List[str] = Field(default_factory=list)
    default: Optional[str] = None
    error: Optional[str] = None


class BuildService:
    """
    Service resolving the parameter values a build is started with.

    Validation here is strict: any rejected value or unresolvable default
    propagates to the caller, so a build never starts with an invalid value.
    """

    def __init__(self, registry: JobRegistry):
        """
        Initialize build service.

        Args:
            registry: Registry holding the loaded job definitions
        """
        self.registry = registry

    def get_job(self, job_name: str) -> JobDefinition:
        return self.registry.get(job_name)

    def resolve_build_parameters(self, job_name: str, submitted: Mapping[str, str]) -> List[ParameterValue]:
        """
        Resolve the values a build of ``job_name`` is started with.

        Submitted values are validated by their parameter; parameters without a
        submitted value fall back to their default, and are left out when there
        is no default at all.

        Raises:
            KeyError: If the job is unknown
            UnknownParameterError: If a submitted name matches no parameter
            ValueNotInChoicesError: If a non-editable parameter rejects its value
            DefaultNotInChoicesError: If a non-editable default is not a choice
            ChoiceProviderError: If a provider fails while values are resolved
        """
        job = self.get_job(job_name)
        unknown = sorted(set(submitted) - set(job.parameter_names()))
        if unknown:
            raise UnknownParameterError(job.name, unknown)

        values: List[ParameterValue] = []
        for param in job.parameters:
            if param.name in submitted:
                values.append(param.create_value(submitted[param.name]))
                continue
            default = param.default_parameter_value()
            if default is not None:
                values.append(default)
            else:
                logger.info("Parameter %s of job %s has no value and no default", param.name, job.name)
        logger.info("Resolved %d parameter value(s) for job %s", len(values), job.name)
        return values

    @log_calls()
    def describe_form(self, job_name: str) -> List[ParameterForm]:
        """
        Describe every parameter of a job for display.

        Choices are listed in tolerant mode, and a default that cannot be
        resolved is reported in ``error`` rather than raised.
        """
        job = self.get_job(job_name)
        forms: List[ParameterForm] = []
        for param in job.parameters:
            choices = param.choices()
            form = ParameterForm(
                name=param.name,
                description=param.description,
                editable=param.editable,
                choices=choices,
            )
            try:
                form.default = param.resolve_default(choices)
            except DefaultNotInChoicesError as exc:
                form.error = str(exc)
            forms.append(form)
        return forms

    def validate_all(self) -> List[str]:
        """Return the problems found in every job's parameter defaults."""
        errors: List[str] = []
        for job in self.registry.all():
            for form in self.describe_form(job.name):
                if form.error:
                    errors.append(f"Job {job.name}: {form.error}")
                elif not form.choices and not form.editable:
                    errors.append(f"Job {job.name}: parameter {form.name!r} has no choices and accepts no value")
        return errors


__all__ = ["BuildService", "ParameterForm", "UnknownParameterError"]
