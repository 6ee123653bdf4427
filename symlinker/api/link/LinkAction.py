"""Action tag of a planned link operation."""

from enum import Enum


class LinkAction(str, Enum):
    CREATE = "create"
    SKIP = "skip"
    REPLACE_THEN_CREATE = "replace_then_create"
