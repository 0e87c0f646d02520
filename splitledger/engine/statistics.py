"""Event statistics and per-participant breakdown

Read-only summaries built from the same inputs as the settlement engine:
- EventStats: participant/activity counts and total expense of one event
- EventsOverview: totals across several events (dashboard view)
- ParticipantBreakdown: what a participant paid, what their share is and
  which activities it comes from. net == aggregated balance.
"""

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from splitledger.core.domain.activity import Activity
from splitledger.core.domain.participant import Participant
from splitledger.core.math.numerical_safeguards import round_money
from splitledger.engine.balance_aggregator import BalanceAggregator
from splitledger.engine.config import EngineConfig


# =============================================================================
# EVENT STATISTICS
# =============================================================================


@dataclass(frozen=True)
class EventStats:
    """Counts and total expense of one event."""

    participants: int
    activities: int
    total_expense: float


@dataclass(frozen=True)
class EventsOverview:
    """Totals across several events."""

    events: int
    participants: int
    activities: int
    total_expense: float
    average_expense: float  # per event, 0.0 when there are no events


def summarize_event(
    participants: Sequence[Participant],
    activities: Sequence[Activity],
) -> EventStats:
    """Participant count, activity count and sum of activity amounts."""
    return EventStats(
        participants=len(participants),
        activities=len(activities),
        total_expense=sum(activity.amount for activity in activities),
    )


def summarize_events(stats: Mapping[str, EventStats]) -> EventsOverview:
    """Aggregate per-event statistics (keyed by event id)."""
    events = len(stats)
    total_expense = sum(s.total_expense for s in stats.values())
    return EventsOverview(
        events=events,
        participants=sum(s.participants for s in stats.values()),
        activities=sum(s.activities for s in stats.values()),
        total_expense=total_expense,
        average_expense=total_expense / events if events else 0.0,
    )


# =============================================================================
# PARTICIPANT BREAKDOWN
# =============================================================================


@dataclass(frozen=True)
class ShareLine:
    """One activity's contribution to a participant's share."""

    activity_id: str
    description: str
    amount: float
    sharers: int
    share: float
    paid_by: str


@dataclass(frozen=True)
class ParticipantBreakdown:
    """Paid / share / net of one participant (amounts rounded for display)."""

    participant_id: str
    total_paid: float
    total_share: float
    net: float
    lines: list[ShareLine] = field(default_factory=list)


def participant_breakdown(
    participants: Sequence[Participant],
    activities: Sequence[Activity],
    config: EngineConfig | None = None,
) -> list[ParticipantBreakdown]:
    """Explain every participant's balance, in balance sheet order.

    The activities are first run through the BalanceAggregator, so the same
    validation applies and unknown ids follow the configured policy.

    Raises:
        SettlementError: see BalanceAggregator.aggregate
    """
    config = config or EngineConfig()
    sheet = BalanceAggregator(config).aggregate(participants, activities)

    def _round(value: float) -> float:
        return round_money(value, config.decimal_places, config.rounding_mode)

    result = []
    for entry in sheet:
        pid = entry.participant_id
        paid = 0.0
        owed = 0.0
        lines = []
        for activity in activities:
            if activity.paid_by == pid:
                paid += activity.amount
            if pid in activity.participants:
                share = activity.share()
                owed += share
                lines.append(
                    ShareLine(
                        activity_id=activity.id,
                        description=activity.description,
                        amount=activity.amount,
                        sharers=len(activity.participants),
                        share=_round(share),
                        paid_by=activity.paid_by,
                    )
                )

        result.append(
            ParticipantBreakdown(
                participant_id=pid,
                total_paid=_round(paid),
                total_share=_round(owed),
                net=_round(entry.balance),
                lines=lines,
            )
        )
    return result
