"""Unit tests for the link path string helpers."""

import pytest

from symlinker.api.link.join_path import join_path
from symlinker.api.link.normalize_destination_root import normalize_destination_root
from symlinker.api.link.split_path import split_path
from symlinker.api.link.strip_trailing_separator import strip_trailing_separator


@pytest.mark.parametrize(
    ("root", "expected"),
    [
        ("C:\\dest\\", "C:\\dest"),
        ("C:\\dest", "C:\\dest"),
        ("C:\\dest\\\\", "C:\\dest\\"),
    ],
)
def test_normalize_strips_exactly_one_separator(root, expected):
    assert normalize_destination_root(root, "\\") == expected


def test_normalize_is_idempotent():
    once = normalize_destination_root("C:\\dest\\", "\\")
    assert normalize_destination_root(once, "\\") == once


def test_normalize_posix():
    assert normalize_destination_root("/srv/dest/", "/") == "/srv/dest"


def test_split_keeps_root_segment():
    assert split_path("C:\\tools\\skill-a", "\\") == ["C:", "tools", "skill-a"]
    assert split_path("/tools/skill-a", "/") == ["", "tools", "skill-a"]


def test_join_adds_single_separator():
    assert join_path("C:\\dest", ".agent", "skills", separator="\\") == "C:\\dest\\.agent\\skills"
    assert join_path("C:\\dest\\", "x", separator="\\") == "C:\\dest\\x"


def test_join_onto_empty_posix_root():
    assert join_path("", "name", separator="/") == "/name"


@pytest.mark.parametrize(
    ("root", "separator"),
    [
        ("/", "/"),
        ("C:\\", "\\"),
    ],
)
def test_normalize_keeps_filesystem_root(root, separator):
    assert normalize_destination_root(root, separator) == root


def test_strip_trailing_separator_from_source():
    assert strip_trailing_separator("C:\\tools\\skill-a\\", "\\") == "C:\\tools\\skill-a"
    assert strip_trailing_separator("/tools/skill-a/", "/") == "/tools/skill-a"
    assert strip_trailing_separator("/tools/skill-a", "/") == "/tools/skill-a"


def test_split_root_has_single_segment():
    assert split_path("/", "/") == [""]
    assert split_path("C:\\", "\\") == ["C:"]
    assert split_path("C:\\tools\\", "\\") == ["C:", "tools"]
