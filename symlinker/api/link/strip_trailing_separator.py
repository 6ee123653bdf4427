"""Drop one trailing separator from a path string."""


def strip_trailing_separator(path: str, separator: str) -> str:
    """Remove exactly one trailing separator, if present.

    A filesystem root keeps its separator: ``/`` stays ``/`` and ``C:\\``
    stays ``C:\\``, since ``""`` and ``C:`` do not name the root.
    """
    if not path.endswith(separator):
        return path
    stripped = path[: -len(separator)]
    if not stripped or (stripped.endswith(":") and separator not in stripped):
        return path
    return stripped
