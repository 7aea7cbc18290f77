"""
Clock Sources

The account service stamps postings with the date returned by its clock
and never reads any other time source. SystemClock is used in production;
FixedClock lets tests pin and move the posting date.
"""

from datetime import date, timedelta
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell today's date"""

    def today(self) -> date:
        ...


class SystemClock:
    """Reads the current local date"""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a given date until moved explicitly"""

    def __init__(self, current: date):
        self._current = current

    def today(self) -> date:
        return self._current

    def set(self, current: date) -> None:
        self._current = current

    def advance(self, days: int = 1) -> date:
        self._current = self._current + timedelta(days=days)
        return self._current
