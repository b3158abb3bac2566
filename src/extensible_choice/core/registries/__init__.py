from .job_registry import JobRegistry
from .registry_base import NameRegistry

__all__ = ["JobRegistry", "NameRegistry"]
