"""Execute a plan with Python filesystem calls."""

import json
import os
import shutil
from pathlib import Path

from ..link.LinkAction import LinkAction
from ..link.LinkOperation import LinkOperation
from .Executor import Executor


def _remove_existing(path: str) -> None:
    """Remove whatever occupies ``path``: a directory, a file, or a symlink of either kind."""
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
        return
    try:
        os.unlink(path)
    except IsADirectoryError:
        os.rmdir(path)
    except PermissionError:
        # Windows directory symlinks only go away through rmdir
        os.rmdir(path)


class DirectExecutor(Executor):
    """Perform mkdir, removal and symlink calls in-process.

    Failures do not stop the run; every failure is reported in the error
    text and turns the exit status to 1. The artifact is a JSON log of the
    plan and the per-operation outcome.
    """

    name = "direct"
    artifact_suffix = ".json"

    def _run(self, artifact_path: Path) -> tuple[int, str]:
        errors: list[str] = []
        results: list[dict[str, object]] = []

        for group in self.plan.groups:
            try:
                os.makedirs(group.directory, exist_ok=True)
            except OSError as e:
                errors.append(f"{group.directory}: {e}")
                continue

            for op in group.operations:
                status, error = self._apply(op)
                results.append({"link_path": op.link_path, "action": op.action.value, "status": status, "error": error})
                if error:
                    errors.append(f"{op.link_path}: {error}")

        log = {"plan": self.plan.to_dict(), "results": results, "errors": errors}
        artifact_path.write_text(json.dumps(log, indent=2), encoding="utf-8")
        return (1 if errors else 0), "\n".join(errors)

    def _apply(self, op: LinkOperation) -> tuple[str, str]:
        if op.action is LinkAction.SKIP:
            return "skipped", ""
        try:
            if op.action is LinkAction.REPLACE_THEN_CREATE and os.path.lexists(op.link_path):
                _remove_existing(op.link_path)
            os.symlink(op.target, op.link_path, target_is_directory=op.is_directory)
        except OSError as e:
            return "failed", str(e)
        return "created", ""
