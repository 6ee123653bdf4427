"""Filesystem access used while planning."""

from abc import ABC, abstractmethod

from .EntryKind import EntryKind


class FilesystemProbe(ABC):
    """Read-only planning queries plus idempotent directory creation."""

    @abstractmethod
    def exists(self, path: str) -> EntryKind:
        """Return what occupies ``path``, EntryKind.NONE if nothing does.

        A symlink is reported as LINK even when it dangles.
        """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if ``path`` is a directory (following symlinks)."""

    @abstractmethod
    def make_directories(self, path: str) -> None:
        """Create ``path`` and its parents; no-op if it already exists."""
