"""Tests for todoappend.clock module."""

from __future__ import annotations

from datetime import date, datetime, timezone
from unittest.mock import patch

from todoappend.clock import Clock, FixedClock, date_window


class TestClock:
    """Tests for Clock class."""

    def test_uses_reference_zone(self) -> None:
        """Test the date is taken in the configured zone."""
        # 2024-03-01 20:00 UTC is already 2024-03-02 in Tokyo
        instant = datetime(2024, 3, 1, 20, 0, tzinfo=timezone.utc)

        with patch("todoappend.clock.datetime") as mock_datetime:
            mock_datetime.now.side_effect = lambda tz: instant.astimezone(tz)
            assert Clock("Asia/Tokyo").today() == date(2024, 3, 2)
            assert Clock("UTC").today() == date(2024, 3, 1)

    def test_fixed_clock(self) -> None:
        """Test fixed clocks accept strings and dates."""
        assert FixedClock("2024-03-01").today() == date(2024, 3, 1)
        assert FixedClock(date(2024, 3, 1)).today() == date(2024, 3, 1)


class TestDateWindow:
    """Tests for date_window function."""

    def test_crosses_month(self) -> None:
        """Test the window rolls over month ends."""
        assert date_window(date(2024, 2, 26), 7) == "2024-03-04"

    def test_zero_days(self) -> None:
        """Test a zero window is today."""
        assert date_window(date(2024, 2, 26), 0) == "2024-02-26"
