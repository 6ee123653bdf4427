"""One concrete unit of link work."""

from dataclasses import dataclass

from .EntryKind import EntryKind
from .LinkAction import LinkAction


@dataclass(frozen=True)
class LinkOperation:
    """Link ``link_name`` inside ``destination`` pointing at ``target``."""

    destination: str
    link_name: str
    link_path: str
    target: str
    source: str
    is_directory: bool
    action: LinkAction
    existing: EntryKind = EntryKind.NONE

    @property
    def is_executable(self) -> bool:
        return self.action is not LinkAction.SKIP

    def to_dict(self) -> dict[str, object]:
        return {
            "destination": self.destination,
            "link_name": self.link_name,
            "link_path": self.link_path,
            "target": self.target,
            "source": self.source,
            "is_directory": self.is_directory,
            "action": self.action.value,
            "existing": self.existing.value,
        }
