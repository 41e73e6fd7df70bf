"""Shared test fixtures for pidlock tests."""

from pathlib import Path

import pytest
from fakes import FakeProcessTable
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def pidfile_path(tmp_path: Path) -> Path:
    """Path to a pidfile whose parent directory does not exist yet."""
    return tmp_path / "run" / "test.pid"


@pytest.fixture
def processes() -> FakeProcessTable:
    """Empty fake process table."""
    return FakeProcessTable()
