"""Select a plan renderer by name."""

import sys
from collections.abc import Callable

from ..link.Plan import Plan
from .render_cmd_script import render_cmd_script
from .render_sh_script import render_sh_script

_RENDERERS: dict[str, tuple[Callable[[Plan], str], str]] = {
    "cmd": (render_cmd_script, ".cmd"),
    "sh": (render_sh_script, ".sh"),
}


def get_renderer(name: str = "auto") -> tuple[Callable[[Plan], str], str]:
    """Return ``(render, file_extension)`` for ``name``.

    ``auto`` picks ``cmd`` on Windows and ``sh`` everywhere else.
    """
    if name == "auto":
        name = "cmd" if sys.platform == "win32" else "sh"
    try:
        return _RENDERERS[name]
    except KeyError:
        raise ValueError(f"Unknown renderer {name!r}; expected one of: auto, {', '.join(_RENDERERS)}") from None
