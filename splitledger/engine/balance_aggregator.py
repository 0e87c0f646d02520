"""Balance Aggregator — activities → net balance per participant

For every activity, in order:
    share = amount / len(participants)
    balance[paid_by]     += amount
    balance[p]           -= share    for p in participants

The payer is credited the full amount whether or not they share the cost.

CRITICAL INVARIANTS:
1. Opening balance of every declared participant is 0, in declaration order
2. sum(balances) == 0 within conservation_tolerance * max(1, volume)
3. No division by zero: an activity without sharers fails the call
"""

from typing import Iterable, Sequence

from splitledger.core.domain.activity import Activity
from splitledger.core.domain.balance import BalanceEntry, BalanceSheet
from splitledger.core.domain.participant import Participant
from splitledger.core.errors import (
    InvalidInputError,
    InvariantViolationError,
    PreconditionFailedError,
    UnknownParticipantError,
)
from splitledger.core.math.numerical_safeguards import is_valid_float, is_zero
from splitledger.engine.config import EngineConfig, UnknownParticipantPolicy
from splitledger.utils.logger import logs


class BalanceAggregator:
    """Reduces an activity list into an ordered BalanceSheet.

    Stateless: every aggregate() call works on its own local ledger.
    """

    def __init__(self, config: EngineConfig | None = None):
        """
        Args:
            config: engine configuration (default EngineConfig())
        """
        self.config = config or EngineConfig()

    @logs.timed("aggregate")
    def aggregate(
        self,
        participants: Sequence[Participant],
        activities: Iterable[Activity],
    ) -> BalanceSheet:
        """Compute net balances.

        Args:
            participants: event participants, in declaration order
            activities: event activities, in the order they were recorded

        Returns:
            BalanceSheet in first-seen order

        Raises:
            InvalidInputError: duplicate participant id
            UnknownParticipantError: unknown id under UnknownParticipantPolicy.REJECT
            PreconditionFailedError: activity with no sharers or a non-positive amount
            InvariantViolationError: balances do not sum to zero
        """
        order: list[str] = []
        ledger: dict[str, float] = {}

        for participant in participants:
            if participant.id in ledger:
                raise InvalidInputError(f"Duplicate participant id '{participant.id}'")
            order.append(participant.id)
            ledger[participant.id] = 0.0

        volume = 0.0
        count = 0
        for activity in activities:
            self._check_preconditions(activity)

            for pid in (activity.paid_by, *activity.participants):
                if pid not in ledger:
                    self._admit_unknown(pid, activity, order, ledger)

            share = activity.amount / len(activity.participants)
            ledger[activity.paid_by] += activity.amount
            for pid in activity.participants:
                ledger[pid] -= share

            volume += activity.amount
            count += 1

        sheet = BalanceSheet(
            entries=tuple(BalanceEntry(pid, ledger[pid]) for pid in order),
            volume=volume,
        )
        self._check_conservation(sheet)

        logs.debug(
            f"Aggregated {count} activities over {len(sheet)} participants "
            f"(volume={volume:.2f})"
        )
        return sheet

    # -------------------------------------------------------------------------

    @staticmethod
    def _check_preconditions(activity: Activity) -> None:
        # Models validate on construction, but model_construct() and duck-typed
        # records bypass that.
        if not activity.participants:
            raise PreconditionFailedError(
                f"Activity '{activity.id}' has no participants to split the amount between"
            )
        if not is_valid_float(activity.amount) or activity.amount <= 0:
            raise PreconditionFailedError(
                f"Activity '{activity.id}' amount must be a positive finite number, "
                f"got {activity.amount}"
            )

    def _admit_unknown(
        self,
        participant_id: str,
        activity: Activity,
        order: list[str],
        ledger: dict[str, float],
    ) -> None:
        if self.config.unknown_participant_policy is UnknownParticipantPolicy.REJECT:
            raise UnknownParticipantError(participant_id, activity.id)

        logs.warning(
            f"Activity '{activity.id}' references unknown participant "
            f"'{participant_id}'; adding it with a zero opening balance"
        )
        order.append(participant_id)
        ledger[participant_id] = 0.0

    def _check_conservation(self, sheet: BalanceSheet) -> None:
        total = sheet.total()
        limit = self.config.conservation_tolerance * max(1.0, sheet.volume)
        if not is_zero(total, tol=limit):
            message = (
                f"Balances sum to {total:.12f}, expected 0 "
                f"(tolerance {limit:.3e}, volume {sheet.volume:.2f})"
            )
            logs.error(message)
            raise InvariantViolationError(message)
