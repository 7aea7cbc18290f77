"""
Bank Account

A single in-memory bank account with deposits, withdrawals and a
reverse-chronological statement. Balances are integers and can never go
negative; every posting is recorded in an append-only ledger.
"""

__version__ = "1.0.0"
