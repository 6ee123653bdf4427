"""Raised when the destination root is not an existing directory."""

from ..SymlinkerError import SymlinkerError


class DestinationNotFound(SymlinkerError, FileNotFoundError):
    """Destination path does not exist.

    Raised by LinkPlanBuilder before any filesystem mutation.
    """

    def __init__(self, path: str):
        super().__init__(f"Destination path does not exist: {path}")
        self.path = path
