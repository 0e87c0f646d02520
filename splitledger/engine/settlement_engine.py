"""Settlement Engine — participants + activities → settlements

Pipeline:
    participants, activities → BalanceAggregator → BalanceSheet
                             → SettlementMatcher → list[Settlement]

Pure function of its inputs: no I/O, no caching, no shared state. Callers
recompute from the full activity set after every change.

Inputs may be domain models or plain mappings (records as stored); mappings
are validated through the pydantic models first.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from splitledger.core.domain.activity import Activity
from splitledger.core.domain.balance import BalanceSheet
from splitledger.core.domain.event import EventData
from splitledger.core.domain.participant import Participant
from splitledger.core.domain.settlement import Settlement
from splitledger.core.errors import InvalidInputError, PreconditionFailedError
from splitledger.engine.balance_aggregator import BalanceAggregator
from splitledger.engine.config import EngineConfig
from splitledger.engine.settlement_matcher import SettlementMatcher
from splitledger.utils.logger import logs


ParticipantLike = Participant | Mapping[str, Any]
ActivityLike = Activity | Mapping[str, Any]


@dataclass(frozen=True)
class SettlementResult:
    """Output of one engine run."""

    balances: BalanceSheet
    settlements: list[Settlement]

    def total_settled(self) -> float:
        """Sum of reported settlement amounts"""
        return sum(s.amount for s in self.settlements)


class SettlementEngine:
    """Balance aggregation followed by greedy settlement matching."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.aggregator = BalanceAggregator(self.config)
        self.matcher = SettlementMatcher(self.config)

    def run(
        self,
        participants: Iterable[ParticipantLike],
        activities: Iterable[ActivityLike],
    ) -> SettlementResult:
        """Compute balances and settlements.

        Raises:
            SettlementError: see BalanceAggregator.aggregate / SettlementMatcher.match
        """
        participant_models = [_to_participant(p) for p in participants]
        activity_models = [_to_activity(a) for a in activities]

        balances = self.aggregator.aggregate(participant_models, activity_models)
        settlements = self.matcher.match(balances)

        logs.info(
            f"Computed {len(settlements)} settlements for {len(participant_models)} "
            f"participants and {len(activity_models)} activities"
        )
        return SettlementResult(balances=balances, settlements=settlements)

    def calculate(
        self,
        participants: Iterable[ParticipantLike],
        activities: Iterable[ActivityLike],
    ) -> list[Settlement]:
        """Settlements only (see run())."""
        return self.run(participants, activities).settlements


def calculate_settlements(
    participants: Iterable[ParticipantLike],
    activities: Iterable[ActivityLike],
    config: EngineConfig | None = None,
) -> list[Settlement]:
    """One-call entry point: who pays whom, and how much.

    Example:
        >>> settlements = calculate_settlements(participants, activities)
        >>> [s.to_record() for s in settlements]
        [{'from': 'b', 'to': 'a', 'amount': 50.0}]
    """
    return SettlementEngine(config).calculate(participants, activities)


def recompute_event_data(event_data: EventData, config: EngineConfig | None = None) -> EventData:
    """Return a copy of the bundle with settlements recomputed from scratch."""
    settlements = calculate_settlements(event_data.participants, event_data.activities, config)
    return event_data.model_copy(update={"settlements": settlements})


# -----------------------------------------------------------------------------
# Input coercion
# -----------------------------------------------------------------------------


def _to_participant(value: ParticipantLike) -> Participant:
    if isinstance(value, Participant):
        return value
    try:
        return Participant.model_validate(value)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid participant record: {e}") from e


def _to_activity(value: ActivityLike) -> Activity:
    if isinstance(value, Activity):
        return value
    try:
        return Activity.model_validate(value)
    except ValidationError as e:
        # Amount and sharer list are split preconditions, everything else is bad input
        fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        if fields & {"amount", "participants"}:
            raise PreconditionFailedError(f"Invalid activity record: {e}") from e
        raise InvalidInputError(f"Invalid activity record: {e}") from e
