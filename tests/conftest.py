"""Shared pytest configuration and fixtures for all tests."""

import json
import re
import shlex
from pathlib import Path

import pytest

from notelinks.api.link._AbstractCitationLookup import _AbstractCitationLookup
from notelinks.api.link._AbstractHeadingSearch import _AbstractHeadingSearch
from notelinks.api.link._AbstractNavigator import _AbstractNavigator
from notelinks.api.link.AnchorDirectories import AnchorDirectories
from notelinks.api.link.LinkContext import LinkContext
from notelinks.api.link.ResolutionPolicy import ResolutionPolicy
from notelinks.api.osprofile._AbstractRunner import _AbstractRunner
from notelinks.api.osprofile.OSProfile import OSProfile


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no real shell access")
    config.addinivalue_line("markers", "integration: tests that run real shell commands")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Test doubles
# =============================================================================

_POSIX_TEST_RE = re.compile(r'^if \[ -([fd]) "(.*)" \]; then echo true; else echo false; fi$')


def _posix_unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text)


class RecordingRunner(_AbstractRunner):
    """Shell stand-in that records commands and simulates a filesystem.

    POSIX existence tests are answered from ``dirs`` and ``files``; any other
    read_line command gets "false". ``mkdir -p`` commands add to ``dirs``.
    """

    def __init__(self, dirs: set[str] | None = None, files: set[str] | None = None):
        self.dirs = set(dirs or ())
        self.files = set(files or ())
        self.read_commands: list[str] = []
        self.run_commands: list[str] = []

    @property
    def commands(self) -> list[str]:
        return self.read_commands + self.run_commands

    def read_line(self, command: str) -> str | None:
        self.read_commands.append(command)
        match = _POSIX_TEST_RE.match(command)
        if not match:
            return "false"
        kind, quoted = match.groups()
        path = _posix_unescape(quoted)
        present = path in (self.dirs if kind == "d" else self.files)
        return "true" if present else "false"

    def run(self, command: str) -> int:
        self.run_commands.append(command)
        if command.startswith("mkdir -p "):
            self.dirs.add(shlex.split(command)[2])
        return 0


class RecordingNavigator(_AbstractNavigator):
    def __init__(self, current: str):
        self.current = current
        self.visited: list[str] = []

    def current_file(self) -> str:
        return self.current

    def navigate_to(self, path: str) -> None:
        self.visited.append(path)
        self.current = path


class RecordingHeadingSearch(_AbstractHeadingSearch):
    def __init__(self, line: int | None = 1):
        self.line = line
        self.anchors: list[str] = []

    def jump_to_heading(self, anchor_ref: str) -> int | None:
        self.anchors.append(anchor_ref)
        return self.line


class StubCitationLookup(_AbstractCitationLookup):
    """Answers from a dict keyed by the (pattern-escaped) citation."""

    def __init__(self, answers: dict[str, str] | None = None):
        self.answers = answers or {}
        self.keys: list[str] = []

    def resolve_citation(self, cite_key: str) -> str | None:
        self.keys.append(cite_key)
        return self.answers.get(cite_key)


# =============================================================================
# Fixtures
# =============================================================================

NOTES_DIR = "/home/u/notes"
ROOT_DIR = "/nb"
HOME_DIR = "/home/u"
CURRENT_FILE = "/home/u/notes/daily/today.md"


@pytest.fixture(autouse=True)
def notelinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point NOTELINKS_HOME at a temp directory for every test."""
    home = tmp_path / ".notelinks"
    monkeypatch.setenv("NOTELINKS_HOME", str(home))
    return home


@pytest.fixture
def write_config(notelinks_home: Path):
    """Write a config dict to NOTELINKS_HOME/config.json."""

    def _write(config: dict) -> Path:
        notelinks_home.mkdir(parents=True, exist_ok=True)
        path = notelinks_home / "config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def notices() -> list[str]:
    return []


@pytest.fixture
def make_ctx(runner: RecordingRunner, notices: list[str]):
    """Factory for a LinkContext on a given OS profile with recording services.

    The navigator, heading search and citation lookup are attached to the
    returned context so tests can inspect them.
    """

    def _make(
        os_name: str = "linux",
        relative_to: str = "first",
        create_dirs: bool = True,
        citations: dict[str, str] | None = None,
        heading_line: int | None = 1,
        current_file: str = CURRENT_FILE,
        initial_dir: str = NOTES_DIR,
        root_dir: str | None = ROOT_DIR,
        max_depth: int = 3,
    ) -> LinkContext:
        profile = OSProfile.get(os_name)
        navigator = RecordingNavigator(current_file)
        return LinkContext(
            profile=profile,
            runner=runner,
            anchors=AnchorDirectories(
                initial_dir=initial_dir,
                current_file=navigator.current_file,
                root_dir=root_dir,
                home_dir=HOME_DIR,
            ),
            policy=ResolutionPolicy(relative_to=relative_to, create_dirs=create_dirs),
            navigator=navigator,
            headings=RecordingHeadingSearch(heading_line),
            citations=StubCitationLookup(citations),
            notify=notices.append,
            max_depth=max_depth,
        )

    return _make


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
