"""Operations planned for one destination directory."""

from dataclasses import dataclass

from .LinkOperation import LinkOperation


@dataclass(frozen=True)
class DestinationGroup:
    directory: str
    operations: tuple[LinkOperation, ...]
