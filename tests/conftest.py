"""Pytest configuration and fixtures for JSON Delta tests."""

import os
from pathlib import Path

import pytest

from jsondelta.config import DiffConfig
from jsondelta.engine import DeltaEngine

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def engine() -> DeltaEngine:
    """Create an engine with the default configuration."""
    return DeltaEngine(DiffConfig())


@pytest.fixture
def text_engine() -> DeltaEngine:
    """Create an engine that diffs strings of 10+ characters line by line."""
    return DeltaEngine(DiffConfig(text_diff_min_length=10))


@pytest.fixture
def bridge_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the bridge importable and quiet in child processes."""
    pythonpath = os.environ.get("PYTHONPATH")
    paths = [str(SRC_DIR)] + ([pythonpath] if pythonpath else [])
    monkeypatch.setenv("PYTHONPATH", os.pathsep.join(paths))
    monkeypatch.setenv("JSONDELTA_LOG_LEVEL", "WARNING")
