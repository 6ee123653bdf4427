"""Strip the trailing separator from a destination root."""

from .strip_trailing_separator import strip_trailing_separator


def normalize_destination_root(destination: str, separator: str) -> str:
    """Remove exactly one trailing separator unless ``destination`` is a root.

    Idempotent: a root without a trailing separator is returned unchanged.
    """
    return strip_trailing_separator(destination, separator)
