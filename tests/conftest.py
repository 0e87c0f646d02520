# tests/conftest.py
import pytest
from loguru import logger

from splitledger.core.domain import Activity, Participant
from splitledger.utils.logger import logs


@pytest.fixture(autouse=True)
def disable_default_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def log_records():
    """
    Collect splitledger log records emitted during a test.

    Usage:
        def test_x(log_records):
            ...
            assert any(r["level"].name == "WARNING" for r in log_records)
    """
    records = []
    sink_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")
    logs.enable()
    yield records
    logs.disable()
    logger.remove(sink_id)


@pytest.fixture
def make_participant():
    """Factory fixture for Participant (event 'trip')."""

    def _make(pid: str, name: str | None = None, **kwargs) -> Participant:
        return Participant(id=pid, event_id="trip", name=name or pid.upper(), **kwargs)

    return _make


@pytest.fixture
def make_activity():
    """Factory fixture for Activity (event 'trip', auto-numbered ids)."""
    counter = {"n": 0}

    def _make(amount: float, paid_by: str, participants: list[str], **kwargs) -> Activity:
        counter["n"] += 1
        kwargs.setdefault("id", f"act{counter['n']}")
        kwargs.setdefault("description", f"Expense {counter['n']}")
        return Activity(
            event_id="trip",
            amount=amount,
            paid_by=paid_by,
            participants=participants,
            **kwargs,
        )

    return _make


@pytest.fixture
def abc(make_participant) -> list[Participant]:
    """Participants a, b, c in declaration order."""
    return [make_participant("a", "Alice"), make_participant("b", "Bob"), make_participant("c", "Chandra")]
