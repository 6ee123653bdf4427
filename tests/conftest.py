"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from symlinker.api.link.EntryKind import EntryKind
from symlinker.api.link.FilesystemProbe import FilesystemProbe


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests (applied by location)")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def symlinker_home(tmp_path_factory, monkeypatch) -> Path:
    """Point SYMLINKER_HOME at a fresh directory for every test."""
    home = tmp_path_factory.mktemp("symlinker_home")
    monkeypatch.setenv("SYMLINKER_HOME", str(home))
    return home


@pytest.fixture
def write_config(symlinker_home: Path):
    """Write a config.json into SYMLINKER_HOME and return its path."""

    def _write(config: dict | str) -> Path:
        path = symlinker_home / "config.json"
        path.write_text(config if isinstance(config, str) else json.dumps(config), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Test Helpers
# =============================================================================


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run


class FakeFilesystem(FilesystemProbe):
    """In-memory probe for Windows-style (or any separator) path strings.

    Records every query and mkdir in ``events`` so tests can check ordering.
    """

    def __init__(self, separator: str = "\\"):
        self.separator = separator
        self.entries: dict[str, EntryKind] = {}
        self.link_to_directory: set[str] = set()
        self.events: list[tuple[str, str]] = []

    def _key(self, path: str) -> str:
        if len(path) > 1 and path.endswith(self.separator):
            return path[: -len(self.separator)]
        return path

    def add_dir(self, path: str) -> "FakeFilesystem":
        self.entries[self._key(path)] = EntryKind.DIRECTORY
        return self

    def add_file(self, path: str) -> "FakeFilesystem":
        self.entries[self._key(path)] = EntryKind.FILE
        return self

    def add_link(self, path: str, to_directory: bool = False) -> "FakeFilesystem":
        self.entries[self._key(path)] = EntryKind.LINK
        if to_directory:
            self.link_to_directory.add(self._key(path))
        return self

    def exists(self, path: str) -> EntryKind:
        self.events.append(("exists", path))
        return self.entries.get(self._key(path), EntryKind.NONE)

    def is_directory(self, path: str) -> bool:
        self.events.append(("is_directory", path))
        key = self._key(path)
        kind = self.entries.get(key, EntryKind.NONE)
        return kind is EntryKind.DIRECTORY or key in self.link_to_directory

    def make_directories(self, path: str) -> None:
        self.events.append(("mkdir", path))
        self.entries.setdefault(self._key(path), EntryKind.DIRECTORY)


@pytest.fixture
def windows_fs() -> FakeFilesystem:
    """Fake Windows tree: C:\\dest, D:\\dest, C:\\tools\\skill-a (dir), C:\\tools\\notes.txt."""
    return (
        FakeFilesystem("\\")
        .add_dir("C:\\dest")
        .add_dir("D:\\dest")
        .add_dir("C:\\tools")
        .add_dir("C:\\tools\\skill-a")
        .add_file("C:\\tools\\notes.txt")
    )


@pytest.fixture
def posix_fs() -> FakeFilesystem:
    """Fake POSIX tree: /dest, /tools/skill-a (dir)."""
    return FakeFilesystem("/").add_dir("/dest").add_dir("/tools").add_dir("/tools/skill-a")


@pytest.fixture
def link_tree(tmp_path: Path) -> dict[str, Path]:
    """Real tree under tmp_path: tools/skill-a (dir), tools/notes.txt, dest/."""
    tools = tmp_path / "tools"
    skill = tools / "skill-a"
    skill.mkdir(parents=True)
    (skill / "SKILL.md").write_text("# skill a\n", encoding="utf-8")
    notes = tools / "notes.txt"
    notes.write_text("notes\n", encoding="utf-8")
    dest = tmp_path / "dest"
    dest.mkdir()
    return {"root": tmp_path, "skill": skill, "notes": notes, "dest": dest}
