"""Get symlinker home directory path or path under it."""

import os
from pathlib import Path

from ...constants import SYMLINKER_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get symlinker home directory path or path under it.

    Checks SYMLINKER_HOME environment variable first, defaults to
    ~/.symlinker if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "scripts")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.symlinker")
        >>> get_home_dir("config.json")
        Path("/Users/user/.symlinker/config.json")
    """
    home_env = os.environ.get("SYMLINKER_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / SYMLINKER_HOME_EXT

    return home / Path(*parts) if parts else home
