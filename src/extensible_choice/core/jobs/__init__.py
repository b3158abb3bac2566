from .file_spec import JobFileSpec, ParameterDefinitionSpec
from .job import JobDefinition

__all__ = ["JobDefinition", "JobFileSpec", "ParameterDefinitionSpec"]
