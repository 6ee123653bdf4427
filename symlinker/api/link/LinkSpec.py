"""One requested source entry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkSpec:
    """A source path captured at plan-build time.

    ``is_directory`` decides whether a directory-type link is requested.
    ``exists`` is False for sources missing on disk; they are still planned.
    """

    source: str
    is_directory: bool
    exists: bool = True
