"""Kind of filesystem entry found at a path."""

from enum import Enum


class EntryKind(str, Enum):
    NONE = "none"
    FILE = "file"
    DIRECTORY = "directory"
    LINK = "link"
