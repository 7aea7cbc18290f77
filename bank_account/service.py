"""
Account Service

Validates, posts and reports transactions against a single ledger.
Every posting runs validate -> compute -> append under one lock, so the
balance never goes negative and sequence numbers stay strictly increasing
even with concurrent callers. Failed operations raise before anything is
touched: no record, no balance change, no sequence number consumed.
"""

import sys
import threading
from typing import Optional, TextIO, Tuple

from .clock import Clock, SystemClock
from .errors import InsufficientFunds, InvalidAmount
from .ledger import DISPLAY_DATE_FORMAT, Ledger, TransactionRecord
from .logging_config import get_logger, log_action
from .statement import STATEMENT_HEADER, StatementPrinter


class AccountService:
    """
    Deposit, withdraw and print the statement of one account
    """

    def __init__(self, stream: Optional[TextIO] = None, clock: Optional[Clock] = None):
        self.ledger = Ledger()
        self.statement_printer = StatementPrinter(
            stream if stream is not None else sys.stdout,
            header=STATEMENT_HEADER,
            date_format=DISPLAY_DATE_FORMAT
        )
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._lock = threading.RLock()
        self.logger = get_logger("bank_account.service")

    @property
    def clock(self) -> Clock:
        return self._clock

    @clock.setter
    def clock(self, clock: Clock) -> None:
        self._clock = clock

    @property
    def balance(self) -> int:
        """Current account balance"""
        with self._lock:
            return self.ledger.current_balance()

    def transactions(self) -> Tuple[TransactionRecord, ...]:
        """Posted records in posting order"""
        with self._lock:
            return self.ledger.history_snapshot()

    def deposit(self, amount: int) -> TransactionRecord:
        """
        Deposit a positive amount

        Args:
            amount: Amount to credit, must be an integer > 0

        Returns:
            The posted TransactionRecord

        Raises:
            InvalidAmount: If amount is not strictly positive
        """
        self._validate_positive_amount(amount)

        with self._lock:
            new_balance = self.ledger.current_balance() + amount
            record = self._post(amount, new_balance)

        log_action(
            self.logger, "debug",
            f"Deposit of {amount} completed. New balance: {new_balance}",
            action="deposit", resource="account",
            extra={"amount": amount, "balance": new_balance, "sequence": record.sequence}
        )
        return record

    def withdraw(self, amount: int) -> TransactionRecord:
        """
        Withdraw a positive amount no larger than the current balance

        Args:
            amount: Amount to debit, must be an integer > 0

        Returns:
            The posted TransactionRecord

        Raises:
            InvalidAmount: If amount is not strictly positive
            InsufficientFunds: If amount exceeds the current balance
        """
        self._validate_positive_amount(amount)

        with self._lock:
            balance = self.ledger.current_balance()
            if amount > balance:
                raise InsufficientFunds(balance=balance, requested=amount)

            new_balance = balance - amount
            record = self._post(-amount, new_balance)

        log_action(
            self.logger, "debug",
            f"Withdrawal of {amount} completed. New balance: {new_balance}",
            action="withdraw", resource="account",
            extra={"amount": amount, "balance": new_balance, "sequence": record.sequence}
        )
        return record

    def print_statement(self) -> None:
        """Write the statement, most recent posting first"""
        self.statement_printer.print(self.transactions())

    def statement_lines(self):
        """Statement lines as they would be printed"""
        return self.statement_printer.render(self.transactions())

    def _post(self, signed_amount: int, new_balance: int) -> TransactionRecord:
        # Caller holds the lock
        record = TransactionRecord(
            date=self._clock.today(),
            amount=signed_amount,
            balance_after=new_balance,
            sequence=self.ledger.next_sequence()
        )
        self.ledger.append(record)
        return record

    @staticmethod
    def _validate_positive_amount(amount) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidAmount(amount)
