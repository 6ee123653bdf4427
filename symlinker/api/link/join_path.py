"""Join path segments onto a directory string."""


def join_path(directory: str, *parts: str, separator: str) -> str:
    """Join ``parts`` onto ``directory`` with exactly one separator between them."""
    joined = directory
    for part in parts:
        if joined.endswith(separator):
            joined = f"{joined}{part}"
        else:
            joined = f"{joined}{separator}{part}"
    return joined
