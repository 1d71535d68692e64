"""Run execution domain exports."""

from .run_contracts import RunOutcome, RunRequest
from .typegen_run_use_case import RunExecutionError, execute_profile_typegen_run

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_profile_typegen_run",
]
