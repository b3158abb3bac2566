from .errors import LoaderError
from .job_loader import load_jobs

__all__ = ["LoaderError", "load_jobs"]
