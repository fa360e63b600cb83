"""Shared pytest fixtures for Focus Timer tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from focustimer.database.db import configure_engine, init_db
from focustimer.storage import MemoryStore
from focustimer.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture(autouse=True)
def prefs_file(tmp_path, monkeypatch):
    """Keep preference writes out of the real home directory."""
    monkeypatch.setattr("focustimer.preferences.APP_DATA_DIR", tmp_path)
    monkeypatch.setattr(
        "focustimer.preferences.PREFERENCES_PATH", tmp_path / "preferences.json",
    )
    return tmp_path / "preferences.json"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def engine(qapp, store):
    """Fresh TimerEngine persisting into an in-memory store."""
    return TimerEngine(parent=None, store=store)


@pytest.fixture
def engine_no_store(qapp):
    """Fresh TimerEngine with persistence disabled."""
    return TimerEngine(parent=None)
