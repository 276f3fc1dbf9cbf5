"""Shared pytest fixtures for the create-quick-start test suite.

Provides reusable fixtures for:
- Temporary working directories
- Pre-built ProjectSpec instances for the common presets
- A Rich console that records output instead of writing to the terminal
- A scripted answer collector
"""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from quick_start.models import ProjectSpec


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory that plays the role of the invoking process's cwd."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    yield cwd


# ---------------------------------------------------------------------------
# Specs
# ---------------------------------------------------------------------------

@pytest.fixture
def basic_js_spec() -> ProjectSpec:
    """my-app / JavaScript / basic / npm."""
    return ProjectSpec.build("my-app", "JavaScript", "basic", "npm")


@pytest.fixture
def full_ts_spec() -> ProjectSpec:
    """svc / TypeScript / full / pnpm."""
    return ProjectSpec.build("svc", "TypeScript", "full", "pnpm")


@pytest.fixture
def empty_custom_spec() -> ProjectSpec:
    """Custom preset with nothing selected."""
    return ProjectSpec.build("bare", "JavaScript", "custom", "yarn", custom_tools=[])


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def record_console() -> Console:
    """Console that records output for later inspection."""
    return Console(record=True, width=120, force_terminal=False, color_system=None)


@pytest.fixture
def err_record_console() -> Console:
    """Recording console standing in for standard error."""
    return Console(record=True, width=120, force_terminal=False, color_system=None)


class ScriptedCollector:
    """Collector double that returns a fixed spec or raises a fixed error."""

    def __init__(self, spec: ProjectSpec | None = None, error: BaseException | None = None) -> None:
        self.spec = spec
        self.error = error
        self.calls = 0

    def collect(self) -> ProjectSpec:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.spec is not None
        return self.spec


@pytest.fixture
def scripted_collector():
    """Factory for ``ScriptedCollector`` instances."""
    return ScriptedCollector
