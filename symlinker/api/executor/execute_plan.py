"""Run an executor and turn failure into ExecutorFailure."""

from .Executor import Executor
from .ExecutorFailure import ExecutorFailure


def execute_plan(executor: Executor) -> int:
    """Run ``executor``; return its exit status (always 0).

    Raises:
        ExecutorFailure: If the exit status is non-zero
    """
    exit_status, error_text = executor.run()
    if exit_status != 0:
        raise ExecutorFailure(exit_status, error_text)
    return exit_status
