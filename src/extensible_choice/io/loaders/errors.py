from __future__ import annotations

"""Shared loader error utilities."""

import os
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

MAX_REPORTED_ERRORS = 3


class LoaderError(RuntimeError):
    """A job file could not be loaded; carries the file path and the underlying cause."""

    def __init__(
        self,
        file_path: str,
        message: str,
        *,
        cause: Exception | None = None,
        job: Optional[str] = None,
    ):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        self.job = job
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        location = self._relative_path(self.file_path)
        if isinstance(self.cause, yaml.MarkedYAMLError) and self.cause.problem_mark is not None:
            mark = self.cause.problem_mark
            location = f"{location}:{mark.line + 1}:{mark.column + 1}"
        base = f"{self.message} ({location})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if isinstance(self.cause, yaml.MarkedYAMLError):
            return f"{base}: {self.cause.problem}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _relative_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover - path on another drive
            return path

    @staticmethod
    def _format_validation_errors(errors: Iterable[dict]) -> str:
        error_list = list(errors)
        snippets = [
            f"{'.'.join(str(entry) for entry in err.get('loc', ())) or '<root>'}: "
            f"{err.get('msg') or err.get('type') or 'validation error'}"
            for err in error_list[:MAX_REPORTED_ERRORS]
        ]
        remaining = len(error_list) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()
