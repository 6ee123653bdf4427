"""Normalize user-supplied sources and destination for planning."""

import os
from collections.abc import Iterable

from ..config.normalize_path import normalize_path

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _normalize_inputs(sources: Iterable[str], destination: str) -> tuple[list[str], str]:
    """Make every path absolute and drop trailing separators from sources.

    The destination keeps a trailing separator if it had one; the builder
    strips exactly one itself.
    """
    normalized_sources = [str(normalize_path(source)) for source in sources]
    destination_path = str(normalize_path(destination))
    if destination.endswith(_SEPARATORS) and not destination_path.endswith(os.sep):
        destination_path += os.sep
    return normalized_sources, destination_path
