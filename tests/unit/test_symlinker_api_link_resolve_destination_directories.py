"""Unit tests for symlinker.api.link.resolve_destination_directories."""

from symlinker.api.link.resolve_destination_directories import resolve_destination_directories
from symlinker.constants import AGENT_REPLICA_SUBFOLDERS


def test_without_replicate_returns_root_only():
    assert resolve_destination_directories("C:\\dest", False, AGENT_REPLICA_SUBFOLDERS, "\\") == ["C:\\dest"]


def test_replicate_follows_declared_order():
    assert resolve_destination_directories("C:\\dest", True, AGENT_REPLICA_SUBFOLDERS, "\\") == [
        "C:\\dest\\.agent\\skills",
        "C:\\dest\\.agents\\skills",
        "C:\\dest\\.claude\\skills",
    ]


def test_replicate_rejoins_with_target_separator():
    assert resolve_destination_directories("/srv", True, ["a\\b", "c/d"], "/") == ["/srv/a/b", "/srv/c/d"]


def test_duplicates_are_kept():
    directories = resolve_destination_directories("C:\\dest", True, ["x/y", "x\\y"], "\\")
    assert directories == ["C:\\dest\\x\\y", "C:\\dest\\x\\y"]


def test_empty_replica_list_yields_no_directories():
    assert resolve_destination_directories("C:\\dest", True, [], "\\") == []
