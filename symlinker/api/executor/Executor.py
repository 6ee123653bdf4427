"""Abstract executor for link plans."""

import time
from abc import ABC, abstractmethod
from contextlib import suppress
from pathlib import Path

from ...constants import ARTIFACT_PREFIX
from ...utils.logger import get_logger
from ..link.Plan import Plan

logger = get_logger("executor")


class Executor(ABC):
    """Runs a Plan and reports ``(exit_status, captured_error_text)``.

    Every run produces a named artifact (a script or an operation log) in
    ``artifact_dir``. It is deleted after the run unless ``retain_artifact``
    is set; ``artifact_path`` is None once deleted.
    """

    name: str = ""
    artifact_suffix: str = ".log"

    def __init__(self, plan: Plan, artifact_dir: Path, retain_artifact: bool = False):
        self.plan = plan
        self.artifact_dir = Path(artifact_dir)
        self.retain_artifact = retain_artifact
        self.artifact_path: Path | None = None

    def run(self) -> tuple[int, str]:
        self.artifact_dir.mkdir(parents=True, exist_ok=True)
        self.artifact_path = self.artifact_dir / f"{ARTIFACT_PREFIX}_{time.time_ns()}{self.artifact_suffix}"
        try:
            exit_status, error_text = self._run(self.artifact_path)
        finally:
            self._release_artifact()
        logger.info("%s executor exited with status %d", self.name, exit_status)
        return exit_status, error_text

    @abstractmethod
    def _run(self, artifact_path: Path) -> tuple[int, str]:
        """Execute the plan, writing the artifact to ``artifact_path``."""

    def _release_artifact(self) -> None:
        if self.artifact_path is None:
            return
        if self.retain_artifact:
            logger.info("Retained artifact %s", self.artifact_path)
            return
        with suppress(FileNotFoundError):
            self.artifact_path.unlink()
        self.artifact_path = None
