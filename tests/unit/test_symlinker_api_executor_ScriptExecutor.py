"""Unit tests for symlinker.api.executor.ScriptExecutor."""

import os
import shutil
import subprocess
import sys

import pytest

from symlinker.api.executor import ScriptExecutor as script_executor_module
from symlinker.api.executor.ScriptExecutor import ScriptExecutor
from symlinker.api.link.LinkPlanBuilder import LinkPlanBuilder


@pytest.fixture
def posix_plan(posix_fs):
    return LinkPlanBuilder(["/tools/skill-a"], "/dest", filesystem=posix_fs, separator="/").build()


@pytest.fixture
def fake_run(monkeypatch):
    calls = []

    def _install(returncode=0, stderr=""):
        def _run(command, capture_output, text):
            script_path = command[-1]
            with open(script_path, encoding="utf-8") as fh:
                calls.append({"command": command, "script": fh.read()})
            return subprocess.CompletedProcess(command, returncode, "", stderr)

        monkeypatch.setattr(script_executor_module.subprocess, "run", _run)
        return calls

    return _install


def test_runs_rendered_sh_script(posix_plan, tmp_path, fake_run):
    calls = fake_run()
    executor = ScriptExecutor(posix_plan, tmp_path, renderer="sh")

    assert executor.run() == (0, "")

    (call,) = calls
    assert call["command"][0] == "sh"
    assert call["command"][1].endswith(".sh")
    assert call["script"].startswith("#!/bin/sh\n")
    assert "ln -s -- ../tools/skill-a skill-a || status=1" in call["script"]
    assert executor.artifact_path is None
    assert list(tmp_path.iterdir()) == []


def test_retained_script_stays(posix_plan, tmp_path, fake_run):
    fake_run()
    executor = ScriptExecutor(posix_plan, tmp_path, retain_artifact=True, renderer="sh")
    executor.run()

    assert executor.artifact_path.exists()
    assert executor.artifact_path.read_text(encoding="utf-8").startswith("#!/bin/sh")


def test_reports_status_and_stderr(posix_plan, tmp_path, fake_run):
    fake_run(returncode=1, stderr="ln: skill-a: File exists\n")
    assert ScriptExecutor(posix_plan, tmp_path, renderer="sh").run() == (1, "ln: skill-a: File exists\n")


def test_cmd_renderer_runs_through_cmd_exe(posix_plan, tmp_path, fake_run):
    calls = fake_run()
    ScriptExecutor(posix_plan, tmp_path, renderer="cmd").run()

    assert calls[0]["command"][:3] == ["cmd.exe", "/d", "/c"]
    assert calls[0]["command"][3].endswith(".cmd")


@pytest.mark.skipif(sys.platform == "win32", reason="sudo elevation is POSIX only")
def test_elevate_prefixes_sudo_for_non_root(posix_plan, tmp_path, fake_run, monkeypatch):
    calls = fake_run()
    monkeypatch.setattr(script_executor_module.os, "geteuid", lambda: 1000)
    ScriptExecutor(posix_plan, tmp_path, renderer="sh", elevate=True).run()

    assert calls[0]["command"][:2] == ["sudo", "sh"]


@pytest.mark.skipif(sys.platform == "win32", reason="sudo elevation is POSIX only")
def test_elevate_skips_sudo_for_root(posix_plan, tmp_path, fake_run, monkeypatch):
    calls = fake_run()
    monkeypatch.setattr(script_executor_module.os, "geteuid", lambda: 0)
    ScriptExecutor(posix_plan, tmp_path, renderer="sh", elevate=True).run()

    assert calls[0]["command"][0] == "sh"


@pytest.mark.skipif(sys.platform == "win32" or shutil.which("sh") is None, reason="needs /bin/sh")
def test_real_sh_execution(link_tree, tmp_path):
    (link_tree["dest"] / "notes.txt").write_text("stale", encoding="utf-8")
    plan = LinkPlanBuilder(
        [str(link_tree["skill"]), str(link_tree["notes"])],
        str(link_tree["dest"]),
    ).build()

    status, error_text = ScriptExecutor(plan, tmp_path / "artifacts", renderer="sh").run()

    assert (status, error_text) == (0, "")
    assert os.readlink(link_tree["dest"] / "skill-a") == "../tools/skill-a"
    assert not (link_tree["dest"] / "notes.txt").is_symlink()
