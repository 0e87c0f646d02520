"""
Tests for domain models: Participant, Activity, Settlement, Event, EventData, BalanceSheet

Checks:
1. Creation and Pydantic validation
2. Business helpers (share, display name, record keys)
3. Immutability (frozen=True)
4. JSON serialization round trip
5. Edge cases and invalid data
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from splitledger.core.domain import (
    Activity,
    BalanceEntry,
    BalanceSheet,
    Event,
    EventData,
    Participant,
    Settlement,
)


CREATED = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# PARTICIPANT TESTS
# =============================================================================


class TestParticipant:
    def test_creation(self) -> None:
        p = Participant(id="p1", event_id="trip", name="Asha", email="asha@example.com")
        assert p.id == "p1"
        assert p.phone is None
        assert p.email == "asha@example.com"

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Participant(id="", event_id="trip", name="Asha")

    def test_immutable(self) -> None:
        p = Participant(id="p1", event_id="trip", name="Asha")
        with pytest.raises(ValidationError):
            p.name = "Other"  # type: ignore


# =============================================================================
# ACTIVITY TESTS
# =============================================================================


class TestActivity:
    @pytest.fixture
    def dinner(self) -> Activity:
        return Activity(
            id="dinner",
            event_id="trip",
            description="Dinner",
            amount=90.0,
            paid_by="a",
            participants=["a", "b", "c"],
        )

    def test_creation(self, dinner: Activity) -> None:
        assert dinner.amount == 90.0
        assert dinner.participants == ["a", "b", "c"]
        assert dinner.created_at is None

    def test_share(self, dinner: Activity) -> None:
        assert dinner.share() == 30.0

    def test_description_defaults_to_empty(self) -> None:
        a = Activity(id="x", event_id="trip", amount=1.0, paid_by="a", participants=["a"])
        assert a.description == ""

    @pytest.mark.parametrize("amount", [0.0, -10.0, float("nan")])
    def test_non_positive_amount_rejected(self, amount: float) -> None:
        with pytest.raises(ValidationError):
            Activity(id="x", event_id="trip", amount=amount, paid_by="a", participants=["a"])

    def test_infinite_amount_rejected(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            Activity(id="x", event_id="trip", amount=float("inf"), paid_by="a", participants=["a"])

    def test_empty_participants_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Activity(id="x", event_id="trip", amount=10.0, paid_by="a", participants=[])

    def test_duplicate_participants_rejected(self) -> None:
        with pytest.raises(ValidationError, match="more than once"):
            Activity(id="x", event_id="trip", amount=10.0, paid_by="a", participants=["a", "b", "a"])

    def test_immutable(self, dinner: Activity) -> None:
        with pytest.raises(ValidationError):
            dinner.amount = 1.0  # type: ignore

    def test_json_roundtrip(self, dinner: Activity) -> None:
        data = json.loads(dinner.model_dump_json())
        assert data["paid_by"] == "a"
        assert data["participants"] == ["a", "b", "c"]
        assert Activity.model_validate_json(dinner.model_dump_json()) == dinner


# =============================================================================
# SETTLEMENT TESTS
# =============================================================================


class TestSettlement:
    def test_creation_by_field_name(self) -> None:
        s = Settlement(from_id="b", to_id="a", amount=50.0)
        assert s.from_id == "b"
        assert s.to_id == "a"

    def test_creation_by_alias(self) -> None:
        s = Settlement.model_validate({"from": "b", "to": "a", "amount": 50.0})
        assert s == Settlement(from_id="b", to_id="a", amount=50.0)

    def test_record_uses_external_keys(self) -> None:
        s = Settlement(from_id="b", to_id="a", amount=50.0)
        assert s.to_record() == {"from": "b", "to": "a", "amount": 50.0}

    def test_self_payment_rejected(self) -> None:
        with pytest.raises(ValidationError, match="to itself"):
            Settlement(from_id="a", to_id="a", amount=5.0)

    @pytest.mark.parametrize("amount", [0.0, -1.0])
    def test_non_positive_amount_rejected(self, amount: float) -> None:
        with pytest.raises(ValidationError):
            Settlement(from_id="b", to_id="a", amount=amount)


# =============================================================================
# EVENT TESTS
# =============================================================================


class TestEvent:
    @pytest.fixture
    def event(self) -> Event:
        return Event(
            id="trip",
            name="Pokhara trip",
            created_by="user-1",
            created_at=CREATED,
            updated_at=CREATED + timedelta(days=1),
        )

    def test_creation(self, event: Event) -> None:
        assert event.name == "Pokhara trip"
        assert event.description is None

    def test_updated_before_created_rejected(self) -> None:
        with pytest.raises(ValidationError, match="before"):
            Event(
                id="trip",
                name="Pokhara trip",
                created_by="user-1",
                created_at=CREATED,
                updated_at=CREATED - timedelta(seconds=1),
            )

    def test_event_data_bundle(self, event: Event) -> None:
        data = EventData(
            event=event,
            participants=[
                Participant(id="a", event_id="trip", name="Alice"),
                Participant(id="b", event_id="trip", name="Bob"),
            ],
            activities=[
                Activity(id="x", event_id="trip", amount=40.0, paid_by="a", participants=["a", "b"]),
                Activity(id="y", event_id="trip", amount=12.5, paid_by="b", participants=["a"]),
            ],
        )
        assert [p.id for p in data.participants] == ["a", "b"]
        assert len(data.activities) == 2
        assert data.settlements == []

    def test_event_data_rejects_foreign_participant(self, event: Event) -> None:
        with pytest.raises(ValidationError, match="belongs to event"):
            EventData(
                event=event,
                participants=[Participant(id="a", event_id="other", name="Alice")],
            )

    def test_event_data_rejects_foreign_activity(self, event: Event) -> None:
        with pytest.raises(ValidationError, match="belongs to event"):
            EventData(
                event=event,
                activities=[
                    Activity(id="x", event_id="other", amount=1.0, paid_by="a", participants=["a"])
                ],
            )


# =============================================================================
# BALANCE SHEET TESTS
# =============================================================================


class TestBalanceSheet:
    @pytest.fixture
    def sheet(self) -> BalanceSheet:
        return BalanceSheet(
            entries=(
                BalanceEntry("a", 60.0),
                BalanceEntry("b", -30.0),
                BalanceEntry("z", 0.0),
                BalanceEntry("c", -30.0),
            ),
            volume=90.0,
        )

    def test_order_preserved(self, sheet: BalanceSheet) -> None:
        assert sheet.participant_ids() == ["a", "b", "z", "c"]
        assert list(sheet.as_dict()) == ["a", "b", "z", "c"]

    def test_lookup(self, sheet: BalanceSheet) -> None:
        assert sheet.get("b") == -30.0
        assert sheet.get("missing") is None
        assert len(sheet) == 4

    def test_partitions(self, sheet: BalanceSheet) -> None:
        assert [e.participant_id for e in sheet.debtors()] == ["b", "c"]
        assert [e.participant_id for e in sheet.creditors()] == ["a"]
        assert sheet.total() == 0.0
        assert sheet.total_debt() == 60.0

    def test_empty(self) -> None:
        sheet = BalanceSheet()
        assert len(sheet) == 0
        assert sheet.total() == 0
        assert sheet.debtors() == []
