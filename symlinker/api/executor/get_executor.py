"""Build the configured executor for a plan."""

import sys
from pathlib import Path

from ..link.LinkConfig import LinkConfig
from ..link.Plan import Plan
from .DirectExecutor import DirectExecutor
from .Executor import Executor
from .ScriptExecutor import ScriptExecutor


def get_executor(
    plan: Plan,
    link_config: LinkConfig,
    retain_artifact: bool,
    artifact_dir: Path,
    name: str | None = None,
) -> Executor:
    """Return an executor for ``plan``.

    ``name`` overrides ``link_config.executor``. ``auto`` means the script
    executor on Windows (mklink needs a shell and possibly elevation) and
    the direct executor elsewhere.
    """
    name = name or link_config.executor
    if name == "auto":
        name = "script" if sys.platform == "win32" else "direct"

    if name == "script":
        return ScriptExecutor(plan, artifact_dir, retain_artifact, elevate=link_config.elevate)
    if name == "direct":
        return DirectExecutor(plan, artifact_dir, retain_artifact)
    raise ValueError(f"Unknown executor {name!r}; expected one of: auto, script, direct")
