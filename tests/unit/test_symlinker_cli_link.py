import os
import sys

import pytest
from typer.testing import CliRunner

from symlinker.cli._create_app import _create_app
from symlinker.cli.link import link

runner = CliRunner()


def test_link_plan_cli(link_tree):
    result = runner.invoke(
        _create_app(),
        ["--display", "json", "link", "plan", str(link_tree["skill"]), "--dest", str(link_tree["dest"])],
    )
    assert result.exit_code == 0
    assert '"target": "../tools/skill-a"' in result.output
    assert not (link_tree["dest"] / "skill-a").exists()


def test_link_plan_cli_yaml_default(link_tree):
    result = runner.invoke(
        _create_app(),
        ["link", "plan", str(link_tree["notes"]), "-t", str(link_tree["dest"]), "--replicate", "--absolute"],
    )
    assert result.exit_code == 0
    assert f"target: {link_tree['notes']}" in result.output
    assert ".claude/skills" in result.output


def test_link_plan_cli_missing_destination(link_tree):
    missing = link_tree["root"] / "nowhere"
    result = runner.invoke(link(), ["plan", str(link_tree["notes"]), "--dest", str(missing)])
    assert result.exit_code == 1
    assert "Destination path does not exist" in result.output


def test_link_plan_cli_requires_dest(link_tree):
    result = runner.invoke(link(), ["plan", str(link_tree["notes"])])
    assert result.exit_code == 2


def test_link_without_subcommand_shows_help():
    result = runner.invoke(link(), [])
    assert result.exit_code == 0
    assert "create" in result.output


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_link_create_cli(link_tree):
    result = runner.invoke(
        _create_app(),
        ["link", "create", str(link_tree["skill"]), str(link_tree["notes"]), "--dest", str(link_tree["dest"]), "-e", "direct"],
    )
    assert result.exit_code == 0
    assert os.readlink(link_tree["dest"] / "skill-a") == "../tools/skill-a"
    assert os.readlink(link_tree["dest"] / "notes.txt") == "../tools/notes.txt"


def test_invalid_display_format(link_tree):
    result = runner.invoke(
        _create_app(), ["--display", "xml", "link", "plan", str(link_tree["notes"]), "--dest", str(link_tree["dest"])]
    )
    assert result.exit_code == 1
