"""
Shared pytest fixtures and configuration for rbglue tests.

This module provides:
- Logging context cleanup for test isolation
- Settings pointing at temporary helper/template locations
- A fake ``subprocess.run`` result builder for discovery tests

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Ensure rbglue package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rbglue.core.logging import clear_context, configure_logging
from rbglue.core.settings import GlueSettings


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test without an explicit marker as a unit test."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_log_context() -> Generator[None, None, None]:
    """Quiet console logging and an empty structlog context for every test."""
    configure_logging(level="WARNING", json_format=False)
    clear_context()
    yield
    clear_context()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep RBGLUE_* variables and stray .env files out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("RBGLUE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


# =============================================================================
# Domain Fixtures
# =============================================================================


@pytest.fixture
def settings() -> GlueSettings:
    """Default settings with a short timeout."""
    return GlueSettings(timeout_seconds=5)


@pytest.fixture
def library_base(tmp_path: Path) -> Path:
    """A vendored library tree with two source files."""
    base = tmp_path / "vendor" / "ruby" / "lib"
    (base / "net").mkdir(parents=True)
    (base / "ostruct.rb").write_text("class OpenStruct; end\n")
    (base / "net" / "http.rb").write_text("module Net; class HTTP; end; end\n")
    return base


def completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    """Build the value ``subprocess.run`` returns for a finished helper."""
    return subprocess.CompletedProcess(
        args=["ruby"],
        returncode=returncode,
        stdout=stdout.encode("utf-8"),
        stderr=stderr.encode("utf-8"),
    )


@pytest.fixture
def make_completed():
    """Expose ``completed`` to tests as a fixture."""
    return completed
