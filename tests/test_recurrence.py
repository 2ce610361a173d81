"""Tests for calendar stepping."""

from datetime import date

import pytest

from cashii.domain.recurrence import occurrence_dates, step_date
from cashii.domain.trigger import Trigger


class TestStepDate:
    """Tests for step_date."""

    def test_zero_steps_is_anchor(self):
        assert step_date(date(2024, 5, 17), Trigger.WEEKLY, 0) == date(2024, 5, 17)

    def test_daily_crosses_month(self):
        assert step_date(date(2024, 1, 30), Trigger.DAILY, 3) == date(2024, 2, 2)

    def test_weekly(self):
        assert step_date(date(2024, 1, 1), Trigger.WEEKLY, 2) == date(2024, 1, 15)

    def test_monthly_clamps_to_month_end(self):
        anchor = date(2024, 1, 31)
        assert step_date(anchor, Trigger.MONTHLY, 1) == date(2024, 2, 29)
        assert step_date(anchor, Trigger.MONTHLY, 2) == date(2024, 3, 31)
        assert step_date(anchor, Trigger.MONTHLY, 3) == date(2024, 4, 30)
        assert step_date(anchor, Trigger.MONTHLY, 13) == date(2025, 2, 28)

    def test_yearly_from_leap_day(self):
        anchor = date(2024, 2, 29)
        assert step_date(anchor, Trigger.YEARLY, 1) == date(2025, 2, 28)
        assert step_date(anchor, Trigger.YEARLY, 2) == date(2026, 2, 28)
        assert step_date(anchor, Trigger.YEARLY, 4) == date(2028, 2, 29)

    def test_once_does_not_step(self):
        with pytest.raises(ValueError, match="does not repeat"):
            step_date(date(2024, 1, 1), Trigger.ONCE, 1)


class TestOccurrenceDates:
    """Tests for occurrence_dates."""

    def test_window_with_lower_bound(self):
        dates = list(
            occurrence_dates(
                date(2024, 1, 1),
                Trigger.WEEKLY,
                start=date(2024, 1, 10),
                end=date(2024, 1, 31),
            )
        )
        assert dates == [date(2024, 1, 15), date(2024, 1, 22), date(2024, 1, 29)]

    def test_end_is_inclusive_by_default(self):
        dates = list(occurrence_dates(date(2024, 1, 1), Trigger.DAILY, end=date(2024, 1, 3)))
        assert dates == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]

    def test_end_can_be_exclusive(self):
        dates = list(
            occurrence_dates(date(2024, 1, 1), Trigger.DAILY, end=date(2024, 1, 3), include_end=False)
        )
        assert dates == [date(2024, 1, 1), date(2024, 1, 2)]

    def test_anchor_after_end(self):
        assert list(occurrence_dates(date(2024, 6, 1), Trigger.MONTHLY, end=date(2024, 5, 31))) == []

    def test_once_yields_anchor_only(self):
        dates = list(occurrence_dates(date(2024, 1, 5), Trigger.ONCE, end=date(2030, 1, 1)))
        assert dates == [date(2024, 1, 5)]
