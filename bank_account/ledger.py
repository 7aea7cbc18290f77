"""
Account Ledger

Append-only record of every posting made against the account. The ledger
keeps the running balance in step with the last posted record and hands
out the sequence numbers used to order the statement. It performs no
validation: the account service checks every posting before appending it.
"""

from datetime import date
from dataclasses import dataclass
from typing import List, Tuple


DISPLAY_DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class TransactionRecord:
    """
    Immutable posted ledger entry.
    Deposits carry a positive amount, withdrawals a negative one.
    """
    date: date
    amount: int
    balance_after: int
    sequence: int  # Posting order, breaks ties between same-date records

    def __post_init__(self):
        if self.date is None:
            raise ValueError("Date cannot be null")

    def to_statement_line(self, date_format: str = DISPLAY_DATE_FORMAT) -> str:
        """Format for display on the statement"""
        return f"{self.date.strftime(date_format)} || {self.amount} || {self.balance_after}"

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary"""
        return {
            "date": self.date.isoformat(),
            "amount": self.amount,
            "balance_after": self.balance_after,
            "sequence": self.sequence,
        }


class Ledger:
    """
    Holds the account balance and its transaction history.
    The balance is always the balance_after of the most recent record.
    """

    def __init__(self):
        self._balance = 0
        self._history: List[TransactionRecord] = []
        self._next_sequence = 1

    def append(self, record: TransactionRecord) -> None:
        """
        Post a record to the end of the history and move the balance to
        its balance_after
        """
        self._history.append(record)
        self._balance = record.balance_after
        self._next_sequence = record.sequence + 1

    def current_balance(self) -> int:
        """Get the current balance"""
        return self._balance

    def history_snapshot(self) -> Tuple[TransactionRecord, ...]:
        """Get a read-only, insertion-ordered view of all posted records"""
        return tuple(self._history)

    def next_sequence(self) -> int:
        """
        Sequence number the next appended record will carry.
        Reading it does not reserve it; only append advances the counter.
        """
        return self._next_sequence

    def __len__(self) -> int:
        return len(self._history)
