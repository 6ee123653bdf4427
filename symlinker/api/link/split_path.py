"""Split a path string into segments."""


def split_path(path: str, separator: str) -> list[str]:
    """Split ``path`` on ``separator``.

    The first segment is the root segment: a drive such as ``C:`` on
    Windows, or the empty string for an absolute POSIX path. A trailing
    separator adds no empty segment, so ``/`` splits to ``[""]`` and
    ``C:\\`` to ``["C:"]``.
    """
    parts = path.split(separator)
    if len(parts) > 1 and not parts[-1]:
        parts.pop()
    return parts
