"""Relative path between two segment sequences."""

from collections.abc import Sequence


def relative_path(current: Sequence[str], target: Sequence[str], separator: str) -> str:
    """Address ``target`` from the directory ``current``.

    Common leading segments are dropped pairwise until the first mismatch,
    one ``..`` is emitted per remaining ``current`` segment, then the
    remaining ``target`` segments follow. The result never ends in a
    separator and is empty when both sequences are equal.

    No filesystem access happens here; callers must only pass sequences
    that share a root segment.

    >>> relative_path(["C:", "a", "b"], ["C:", "a", "c", "d"], "\\\\")
    '..\\\\c\\\\d'
    """
    common = 0
    for current_part, target_part in zip(current, target):
        if current_part != target_part:
            break
        common += 1

    parts = [".."] * (len(current) - common)
    parts.extend(target[common:])
    return separator.join(parts)
