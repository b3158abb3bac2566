from __future__ import annotations

from extensible_choice.core.jobs.job import JobDefinition

from .registry_base import NameRegistry


class JobRegistry(NameRegistry[JobDefinition]):
    """Jobs keyed by name."""

    def add(self, job: JobDefinition) -> None:
        self.register(job.name, job)
