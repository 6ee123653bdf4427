"""Run a rendered plan script, optionally with administrator rights."""

import os
import subprocess
import sys
from pathlib import Path

from ..link.Plan import Plan
from .Executor import Executor
from .get_renderer import get_renderer


class ScriptExecutor(Executor):
    """Render the plan into a script file and run it.

    Args:
        plan: Plan to execute
        artifact_dir: Directory for the generated script
        retain_artifact: Keep the script after the run
        renderer: ``auto``, ``cmd`` or ``sh``
        elevate: Windows - relaunch through an elevated PowerShell;
            POSIX - prefix ``sudo`` unless already root
    """

    name = "script"

    def __init__(
        self,
        plan: Plan,
        artifact_dir: Path,
        retain_artifact: bool = False,
        renderer: str = "auto",
        elevate: bool = False,
    ):
        super().__init__(plan, artifact_dir, retain_artifact)
        self.render, self.artifact_suffix = get_renderer(renderer)
        self.elevate = elevate

    def _run(self, artifact_path: Path) -> tuple[int, str]:
        artifact_path.write_text(self.render(self.plan), encoding="utf-8")

        if self.artifact_suffix == ".cmd" and self.elevate:
            return self._run_elevated_cmd(artifact_path)

        result = subprocess.run(self._command(artifact_path), capture_output=True, text=True)
        return result.returncode, result.stderr

    def _command(self, artifact_path: Path) -> list[str]:
        if self.artifact_suffix == ".cmd":
            return ["cmd.exe", "/d", "/c", str(artifact_path)]
        command = ["sh", str(artifact_path)]
        if self.elevate and sys.platform != "win32" and os.geteuid() != 0:
            command = ["sudo", *command]
        return command

    def _run_elevated_cmd(self, artifact_path: Path) -> tuple[int, str]:
        # An elevated process cannot share our pipes; stderr goes to a side file
        error_path = artifact_path.with_suffix(".err")
        inner = f'""{artifact_path}" 2> "{error_path}""'.replace("'", "''")
        script = (
            "$p = Start-Process -FilePath cmd.exe "
            f"-ArgumentList '/d','/s','/c','{inner}' "
            "-Verb RunAs -Wait -PassThru -WindowStyle Hidden; exit $p.ExitCode"
        )
        result = subprocess.run(
            ["powershell.exe", "-NoProfile", "-NonInteractive", "-Command", script],
            capture_output=True,
            text=True,
        )
        error_text = result.stderr
        if error_path.exists():
            error_text = error_path.read_text(encoding="utf-8", errors="replace") + error_text
            error_path.unlink()
        return result.returncode, error_text
