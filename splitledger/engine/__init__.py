"""Engine — settlement computation.

- BalanceAggregator: activities → ordered net balances
- SettlementMatcher: balances → greedy list of settlements
- SettlementEngine: both stages behind one call
- statistics: event totals and per-participant breakdown
"""

from .balance_aggregator import BalanceAggregator
from .config import (
    DEFAULT_CONSERVATION_TOLERANCE,
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_SETTLEMENT_EPSILON,
    EngineConfig,
    UnknownParticipantPolicy,
)
from .settlement_engine import (
    SettlementEngine,
    SettlementResult,
    calculate_settlements,
    recompute_event_data,
)
from .settlement_matcher import SettlementMatcher
from .statistics import (
    EventStats,
    EventsOverview,
    ParticipantBreakdown,
    ShareLine,
    participant_breakdown,
    summarize_event,
    summarize_events,
)

__all__ = [
    # Config
    "EngineConfig",
    "UnknownParticipantPolicy",
    "DEFAULT_SETTLEMENT_EPSILON",
    "DEFAULT_DECIMAL_PLACES",
    "DEFAULT_CONSERVATION_TOLERANCE",
    # Stages
    "BalanceAggregator",
    "SettlementMatcher",
    "SettlementEngine",
    "SettlementResult",
    "calculate_settlements",
    "recompute_event_data",
    # Statistics
    "EventStats",
    "EventsOverview",
    "ParticipantBreakdown",
    "ShareLine",
    "participant_breakdown",
    "summarize_event",
    "summarize_events",
]
