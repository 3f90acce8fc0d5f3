"""Shared test fixtures for aockit.

Provides isolated settings (cache and session under ``tmp_path``), a
fake remote endpoint built on ``httpx.MockTransport``, and fresh puzzle
registries so individual test modules stay focused.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Callable

import httpx
import pytest

from aockit.config.settings import AocSettings
from aockit.inputs.provider import InputProvider
from aockit.puzzles.registry import PuzzleRegistry, reset_registry

SESSION_TOKEN = "s3cr3t-session"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture()
def settings(tmp_path: Path) -> AocSettings:
    """Settings whose cache and session file live in ``tmp_path``."""
    return AocSettings(
        year=2023,
        base_url="https://puzzles.test",
        cache_dir=tmp_path / "cache",
        session_file=tmp_path / "aoc.session",
    )


@pytest.fixture()
def session_file(settings: AocSettings) -> Path:
    """Write a session token (with surrounding whitespace) to disk."""
    settings.session_file.write_text(f"  {SESSION_TOKEN}\n", encoding="utf-8")
    return settings.session_file


# ---------------------------------------------------------------------------
# Fake remote endpoint
# ---------------------------------------------------------------------------


class FakeRemote:
    """Records requests and answers with a fixed status and body."""

    def __init__(self, status_code: int = 200, body: bytes = b"remote\n") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture()
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture()
def provider(settings: AocSettings, remote: FakeRemote) -> InputProvider:
    """Provider wired to the fake remote instead of the network."""
    return InputProvider(settings, client=remote.client())


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------


@pytest.fixture()
def registry() -> PuzzleRegistry:
    return PuzzleRegistry()


@pytest.fixture()
def default_registry():
    """Reset the module-level registry around a test."""
    reset_registry()
    yield
    reset_registry()


def count_lines(inp) -> int:
    """Puzzle body used across tests: number of input lines."""
    return len(inp.lines())


@pytest.fixture()
def line_counter() -> Callable:
    return count_lines


# ---------------------------------------------------------------------------
# Puzzle scripts on disk
# ---------------------------------------------------------------------------

PUZZLE_SCRIPT = '''\
"""Day 5 puzzles used by the tests."""

from aockit.puzzles.registry import PuzzleRegistry

registry = PuzzleRegistry()


@registry.puzzle
def nodigits(inp):
    return 0


@registry.puzzle
def day5(inp):
    """Count lines.

    want=3
    x
    y
    z
    """
    return len(inp.lines())


@registry.puzzle
def day5b(inp):
    """Last line.

    want=z
    """
    return inp.lines()[-1]
'''


@pytest.fixture()
def puzzle_script(tmp_path: Path) -> Path:
    """A puzzle module with its own registry and docstring samples."""
    path = tmp_path / "day05.py"
    path.write_text(PUZZLE_SCRIPT, encoding="utf-8")
    return path


def load_module(path: Path) -> ModuleType:
    """Import the Python file at *path* without touching ``sys.path``."""
    spec = importlib.util.spec_from_file_location(path.stem, path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
