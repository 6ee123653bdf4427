"""Raised when an executor reports a non-zero exit status."""

from ..SymlinkerError import SymlinkerError


class ExecutorFailure(SymlinkerError, RuntimeError):
    """The executor ran but reported failure.

    No rollback is attempted; some operations may already have succeeded.
    """

    def __init__(self, exit_status: int, error_text: str):
        message = f"Symlink executor exited with status {exit_status}."
        if error_text:
            message = f"{message}\n{error_text}"
        super().__init__(message)
        self.exit_status = exit_status
        self.error_text = error_text
