"""
Banking Error Types

Domain-specific exceptions raised by account operations. Callers branch on
the exception class and read the carried fields to build their own messages.
"""


class BankingError(Exception):
    """Base class for all account operation errors"""
    pass


class InvalidAmount(BankingError, ValueError):
    """
    Raised when a deposit or withdrawal amount is not a strictly positive
    integer
    """

    def __init__(self, amount):
        self.amount = amount
        super().__init__("Amount must be positive")


class InsufficientFunds(BankingError):
    """
    Raised when a withdrawal exceeds the current balance.
    Carries both the balance and the requested amount.
    """

    def __init__(self, balance: int, requested: int):
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"Insufficient funds. Balance: {balance}, requested: {requested}"
        )
