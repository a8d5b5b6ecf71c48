"""Shared pytest fixtures for KeepTime tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from keeptime.storage.db import configure_engine, init_db
from keeptime.storage.checkpoints import CheckpointStore
from keeptime.timer.engine import StopwatchEngine

from helpers import FakeClock


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


@pytest.fixture
def clock():
    """Wall clock frozen at a fixed instant; advance it by hand."""
    return FakeClock()


@pytest.fixture
def store():
    """Checkpoint store backed by the in-memory database."""
    return CheckpointStore()


@pytest.fixture
def engine(qapp):
    """Fresh StopwatchEngine with persistence OFF (pure state machine)."""
    return StopwatchEngine()


@pytest.fixture
def make_engine(qapp, store, clock):
    """Factory for persisted engines sharing one store and one clock."""

    def _make(identifier=None, **kwargs):
        kwargs.setdefault("persist", True)
        kwargs.setdefault("store", store)
        kwargs.setdefault("clock", clock)
        return StopwatchEngine(identifier, **kwargs)

    return _make
