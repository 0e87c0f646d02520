"""
BalanceSheet — ordered net balances of an event

Engine-internal, transient. Positive balance: the participant is owed money
(creditor). Negative balance: the participant owes money (debtor).

Entry order is the order in which participants were first seen (declaration
order, then any ids admitted while aggregating). The settlement matcher
walks debtors and creditors in this order, so it determines the exact shape
of the output and is kept explicit instead of relying on dict ordering.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class BalanceEntry:
    """Net balance of one participant."""

    participant_id: str
    balance: float


@dataclass(frozen=True)
class BalanceSheet:
    """Ordered, immutable sequence of balance entries."""

    entries: tuple[BalanceEntry, ...] = ()

    # Total expense volume the sheet was aggregated from
    volume: float = 0.0

    def __iter__(self) -> Iterator[BalanceEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, participant_id: str, default: float | None = None) -> float | None:
        for entry in self.entries:
            if entry.participant_id == participant_id:
                return entry.balance
        return default

    def participant_ids(self) -> list[str]:
        return [entry.participant_id for entry in self.entries]

    def as_dict(self) -> dict[str, float]:
        """Insertion-ordered dict participant id -> balance"""
        return {entry.participant_id: entry.balance for entry in self.entries}

    def total(self) -> float:
        """Sum of all balances (zero for a consistent sheet)"""
        return sum(entry.balance for entry in self.entries)

    def debtors(self) -> list[BalanceEntry]:
        """Entries with a negative balance, in sheet order"""
        return [entry for entry in self.entries if entry.balance < 0]

    def creditors(self) -> list[BalanceEntry]:
        """Entries with a positive balance, in sheet order"""
        return [entry for entry in self.entries if entry.balance > 0]

    def total_debt(self) -> float:
        """Sum of absolute negative balances"""
        return sum(-entry.balance for entry in self.debtors())
