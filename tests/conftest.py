"""Shared pytest fixtures for hgidr tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """Path to a backing file that does not exist yet.

    Returns:
        Path inside a not-yet-created directory under tmp_path.
    """
    return tmp_path / "share" / "hgidr" / "data.json"


@pytest.fixture
def write_data(data_path: Path):
    """Write a mapping to the backing file as JSON."""

    def _write(payload) -> Path:
        data_path.parent.mkdir(parents=True, exist_ok=True)
        data_path.write_text(json.dumps(payload))
        return data_path

    return _write


@pytest.fixture
def read_data(data_path: Path):
    """Read the backing file back as a mapping."""

    def _read() -> dict:
        return json.loads(data_path.read_text())

    return _read
