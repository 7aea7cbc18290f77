"""
Tests for clock sources
"""

from datetime import date

from bank_account.clock import FixedClock, SystemClock


class TestClocks:
    """Test system and fixed clocks"""
    
    def test_system_clock_returns_today(self):
        """Test that the system clock reads the local date"""
        assert isinstance(SystemClock().today(), date)
    
    def test_fixed_clock(self):
        """Test that a fixed clock stays put until moved"""
        clock = FixedClock(date(2012, 1, 10))
        
        assert clock.today() == date(2012, 1, 10)
        assert clock.today() == date(2012, 1, 10)
        
        clock.set(date(2012, 1, 13))
        assert clock.today() == date(2012, 1, 13)
        
        assert clock.advance() == date(2012, 1, 14)
        assert clock.advance(days=20) == date(2012, 2, 3)
        assert clock.today() == date(2012, 2, 3)
