"""Run execution domain exports."""

from .reverse_run_use_case import RunExecutionError, execute_reverse_engineering_run
from .run_contracts import RunOutcome, RunRequest, WrittenSchema

__all__ = [
    "RunRequest",
    "RunOutcome",
    "WrittenSchema",
    "RunExecutionError",
    "execute_reverse_engineering_run",
]
