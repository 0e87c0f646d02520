"""Settlement Matcher — greedy debtor/creditor netting

Debtors (balance < 0) and creditors (balance > 0) are taken in sheet order.
Each debtor, in turn, pays creditors in order until their debt is gone:

    amount = min(remaining_debt, creditor_running_credit)

A match is reported only if amount > settlement_epsilon (floating-point
residue from equal splits is dropped, not redistributed). The reported
amount is rounded to decimal_places; the running debt and credit are
reduced by the unrounded amount so rounding errors do not compound across
creditors.

The result is deterministic and O(debtors × creditors). It is NOT
guaranteed to use the minimum possible number of transactions: creditors
are drained in declaration order, not by magnitude.
"""

from splitledger.core.domain.balance import BalanceSheet
from splitledger.core.domain.settlement import Settlement
from splitledger.core.errors import InvariantViolationError
from splitledger.core.math.numerical_safeguards import is_positive, is_zero, round_money
from splitledger.engine.config import EngineConfig
from splitledger.utils.logger import logs


class SettlementMatcher:
    """Turns a BalanceSheet into an ordered list of settlements.

    Stateless: running credits live in a per-call list.
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()

    @logs.timed("match")
    def match(self, balances: BalanceSheet) -> list[Settlement]:
        """Greedy matching of debtors against creditors.

        Args:
            balances: aggregated net balances

        Returns:
            Settlements ordered by debtor, then by creditor, in sheet order

        Raises:
            InvariantViolationError: a debtor owes more than the creditors can absorb
        """
        eps = self.config.settlement_epsilon

        debtors = balances.debtors()
        # [participant_id, running credit]
        creditors = [[entry.participant_id, entry.balance] for entry in balances.creditors()]

        settlements: list[Settlement] = []
        for debtor in debtors:
            remaining = abs(debtor.balance)

            for creditor in creditors:
                if is_zero(remaining):
                    break
                creditor_id, credit = creditor
                if not is_positive(credit):
                    continue

                amount = min(remaining, credit)
                if amount <= eps:
                    continue

                settlements.append(
                    Settlement(
                        from_id=debtor.participant_id,
                        to_id=creditor_id,
                        amount=round_money(
                            amount, self.config.decimal_places, self.config.rounding_mode
                        ),
                    )
                )
                remaining -= amount
                creditor[1] = credit - amount

            if is_positive(remaining, tol=eps):
                self._check_residue(debtor.participant_id, remaining, creditors)

        logs.debug(
            f"Matched {len(debtors)} debtors against {len(creditors)} creditors: "
            f"{len(settlements)} settlements"
        )
        return settlements

    def _check_residue(
        self,
        debtor_id: str,
        remaining: float,
        creditors: list[list],
    ) -> None:
        """Distinguish sub-threshold fragmentation from a broken balance sheet.

        Residue is acceptable while the creditors still hold enough (individually
        sub-threshold) credit to cover it; otherwise the sheet does not sum to zero.
        """
        eps = self.config.settlement_epsilon
        leftover_credit = sum(credit for _, credit in creditors if is_positive(credit))

        if is_positive(remaining - leftover_credit, tol=eps):
            message = (
                f"Debtor '{debtor_id}' left with {remaining:.6f} unmatched debt, "
                f"creditors hold only {leftover_credit:.6f}"
            )
            logs.error(message)
            raise InvariantViolationError(message)

        logs.warning(
            f"Debtor '{debtor_id}' left with {remaining:.6f} unsettled: "
            f"remaining credits are each below {eps}"
        )
