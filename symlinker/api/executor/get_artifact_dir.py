"""Resolve where executor artifacts are written."""

from pathlib import Path

from ..config.get_home_dir import get_home_dir
from ..config.normalize_path import normalize_path
from ..link.LinkConfig import LinkConfig


def get_artifact_dir(link_config: LinkConfig) -> Path:
    """Configured artifact_dir, or ``<home>/scripts``."""
    if link_config.artifact_dir:
        return normalize_path(link_config.artifact_dir)
    return get_home_dir("scripts")
