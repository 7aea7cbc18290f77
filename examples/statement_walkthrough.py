#!/usr/bin/env python3
"""
Example: Posting transactions and printing a statement

Replays three postings on pinned dates, shows a rejected withdrawal and
prints the resulting statement to stdout.
"""

from datetime import date

from bank_account.clock import FixedClock
from bank_account.errors import InsufficientFunds
from bank_account.service import AccountService


def main():
    print("🏦 Bank Account - Statement Walkthrough")
    print("=" * 60)
    
    clock = FixedClock(date(2012, 1, 10))
    service = AccountService(clock=clock)
    
    print("\n1. 💰 Deposits")
    service.deposit(1000)
    clock.set(date(2012, 1, 13))
    service.deposit(2000)
    print(f"   Balance: {service.balance}")
    
    print("\n2. 🚫 Rejected withdrawal")
    try:
        service.withdraw(5000)
    except InsufficientFunds as e:
        print(f"   {e}")
    
    print("\n3. 💸 Withdrawal")
    clock.set(date(2012, 1, 14))
    service.withdraw(500)
    print(f"   Balance: {service.balance}")
    
    print("\n4. 📄 Statement\n")
    service.print_statement()


if __name__ == "__main__":
    main()
