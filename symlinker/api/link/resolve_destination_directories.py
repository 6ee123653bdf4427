"""Expand a destination root into the directories that receive links."""

import re
from collections.abc import Sequence

from .join_path import join_path

_SUBFOLDER_SPLIT = re.compile(r"[\\/]+")


def resolve_destination_directories(
    root: str,
    replicate: bool,
    replica_subfolders: Sequence[str],
    separator: str,
) -> list[str]:
    """Return the destination directories in declared order.

    Without ``replicate`` the normalized root is the only directory.
    With it, the root is joined with every replica subfolder; subfolders may
    use either slash and are re-joined with ``separator``. Duplicates are kept.
    """
    if not replicate:
        return [root]

    directories = []
    for subfolder in replica_subfolders:
        parts = [part for part in _SUBFOLDER_SPLIT.split(subfolder) if part]
        directories.append(join_path(root, *parts, separator=separator))
    return directories
