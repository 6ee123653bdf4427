"""Ordered link plan handed to an executor."""

from dataclasses import dataclass

from .DestinationGroup import DestinationGroup
from .LinkAction import LinkAction
from .LinkOperation import LinkOperation
from .LinkSpec import LinkSpec


@dataclass(frozen=True)
class Plan:
    """Directories to ensure plus operations grouped per directory.

    Groups follow the resolved directory order; operations inside a group
    follow the order sources were supplied.
    """

    root: str
    sources: tuple[LinkSpec, ...]
    groups: tuple[DestinationGroup, ...]

    @property
    def directories(self) -> list[str]:
        return [group.directory for group in self.groups]

    @property
    def operations(self) -> list[LinkOperation]:
        return [op for group in self.groups for op in group.operations]

    @property
    def executable_operations(self) -> list[LinkOperation]:
        return [op for op in self.operations if op.is_executable]

    @property
    def skipped_operations(self) -> list[LinkOperation]:
        return [op for op in self.operations if not op.is_executable]

    def counts(self) -> dict[str, int]:
        """Number of operations per action, every action present."""
        counts = {action.value: 0 for action in LinkAction}
        for op in self.operations:
            counts[op.action.value] += 1
        return counts

    def to_dict(self) -> dict[str, object]:
        return {
            "destination": self.root,
            "directories": self.directories,
            "operations": [op.to_dict() for op in self.operations],
            "counts": self.counts(),
        }
