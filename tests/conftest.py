"""Shared fixtures: a bank with predictable IDs and a recording logger."""

import os

import pytest

from depositbook.bank import Bank
from depositbook.config import get_settings
from depositbook.events import EventLogger
from depositbook.orchestrator import DepositorSession
from depositbook.services.ids import SequenceIdGenerator


class RecordingLogger:
    """Stands in for a structlog logger; keeps (level, event, fields)."""
    
    def __init__(self):
        self.records = []
    
    def _record(self, level, event, **fields):
        self.records.append((level, event, fields))
    
    def debug(self, event, **fields):
        self._record("debug", event, **fields)
    
    def info(self, event, **fields):
        self._record("info", event, **fields)
    
    def warning(self, event, **fields):
        self._record("warning", event, **fields)
    
    def error(self, event, **fields):
        self._record("error", event, **fields)
    
    def event_types(self, level=None):
        return [
            fields["event_type"]
            for lvl, _, fields in self.records
            if level is None or lvl == level
        ]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Settings are cached; start every test from a clean environment."""
    for name in list(os.environ):
        if name.startswith("DEPOSITBOOK_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def event_logger(recorder):
    return EventLogger(logger=recorder)


@pytest.fixture
def ids():
    return SequenceIdGenerator(
        ["PZ100001", "PZ100002", "PZ100003", "PZ100004", "PZ100005"]
    )


@pytest.fixture
def bank(ids, event_logger):
    return Bank(id_generator=ids, event_logger=event_logger)


@pytest.fixture
def session(bank, event_logger):
    return DepositorSession(bank=bank, event_logger=event_logger)
