"""Shared test fixtures for ccstatusline."""

import json
import sys
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def qapp():
    """Create a QCoreApplication for tests that need Qt."""
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv or ["test"])
    yield app


@pytest.fixture
def write_jsonl(tmp_path):
    """Return a helper that writes dicts (or raw strings) as a JSONL file."""
    def _write(lines, name: str = "transcript.jsonl") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        text = "\n".join(
            line if isinstance(line, str) else json.dumps(line) for line in lines
        )
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def settings_path(tmp_path) -> Path:
    """Isolated settings INI path."""
    return tmp_path / "config" / "settings.ini"
