from __future__ import annotations

import glob
import logging
import os
from typing import Any, Callable, Dict, Optional

import yaml
from pydantic import ValidationError

from extensible_choice.core.jobs.file_spec import JobFileSpec
from extensible_choice.core.registries.job_registry import JobRegistry
from extensible_choice.io.loaders.errors import LoaderError

logger = logging.getLogger(__name__)


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoaderError(path, f"Expected a mapping at top level, got {type(data).__name__}")
    return data


def load_jobs(
    path: str,
    registry: JobRegistry,
    *,
    evaluator: Optional[Callable[[str], Any]] = None,
) -> None:
    """Load job definitions from YAML files in a directory tree.

    Expected format:
    job: deploy
    parameters:
      - name: TARGET
        editable: false
        provider:
          type: textarea
          choices: |
            staging
            production
    """
    if not os.path.exists(path):
        return
    files = sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))
    for fp in files:
        data = _read_yaml(fp)
        try:
            spec = JobFileSpec.model_validate(data)
        except ValidationError as exc:
            raise LoaderError(fp, "Invalid job definition", cause=exc) from exc

        try:
            job = spec.build_job(evaluator)
        except ValidationError as exc:
            raise LoaderError(fp, f"Invalid parameters for job '{spec.job}'", cause=exc, job=spec.job) from exc

        try:
            registry.add(job)
        except ValueError as exc:
            raise LoaderError(fp, f"Failed to register job '{job.name}'", cause=exc, job=job.name) from exc
        logger.debug("Loaded job %s with %d parameter(s) from %s", job.name, len(job.parameters), fp)
