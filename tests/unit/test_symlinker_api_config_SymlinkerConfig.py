"""Unit tests for symlinker.api.config.SymlinkerConfig."""

import json

import pytest

from symlinker.api.config.SymlinkerConfig import SymlinkerConfig


def test_missing_file_gives_defaults():
    config = SymlinkerConfig.load()
    assert config.link.use_relative_path is True
    assert config.link.replica_subfolders == [".agent/skills", ".agents/skills", ".claude/skills"]
    assert config.log.level == "INFO"


def test_load_partial_file(write_config):
    write_config({"link": {"overwrite_existing": True}, "log": {"level": "DEBUG"}})
    config = SymlinkerConfig.load()
    assert config.link.overwrite_existing is True
    assert config.link.executor == "auto"
    assert config.log.level == "DEBUG"


def test_invalid_json(write_config):
    write_config("{")
    with pytest.raises(ValueError, match="Invalid JSON"):
        SymlinkerConfig.load()


def test_unknown_key_rejected(write_config):
    write_config({"link": {"bogus": 1}})
    with pytest.raises(ValueError, match=r"Configuration validation error: link\.bogus"):
        SymlinkerConfig.load()


def test_bad_executor_rejected(write_config):
    write_config({"link": {"executor": "teleport"}})
    with pytest.raises(ValueError, match="link.executor"):
        SymlinkerConfig.load()


def test_save_round_trip(symlinker_home):
    config = SymlinkerConfig()
    config.link.replica_subfolders = ["shared/skills"]
    config.save()

    path = symlinker_home.resolve() / "config.json"
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["link"]["replica_subfolders"] == ["shared/skills"]
    assert not path.with_suffix(".json.tmp").exists()
    assert SymlinkerConfig.load().link.replica_subfolders == ["shared/skills"]
