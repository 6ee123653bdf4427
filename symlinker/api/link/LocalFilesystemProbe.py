"""FilesystemProbe backed by the local filesystem."""

import os

from .EntryKind import EntryKind
from .FilesystemProbe import FilesystemProbe


class LocalFilesystemProbe(FilesystemProbe):
    def exists(self, path: str) -> EntryKind:
        if os.path.islink(path):
            return EntryKind.LINK
        if os.path.isdir(path):
            return EntryKind.DIRECTORY
        if os.path.lexists(path):
            return EntryKind.FILE
        return EntryKind.NONE

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def make_directories(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)
