"""
Accrual Period Unit Tests

Tests for months worked, days acquired and the two leave valuations.
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from engines.services.accrual_period import AccrualPeriod, natural_end_for


def make_period(start: date, end: date, salary: str = "1000") -> AccrualPeriod:
    return AccrualPeriod(start_date=start, end_date=end, monthly_salary=Decimal(salary))


class TestCoveredMonths:
    """Test calendar months touched by a period."""

    def test_three_partial_and_full_months(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        assert period.covered_months() == [
            date(2024, 4, 1),
            date(2024, 5, 1),
            date(2024, 6, 1),
        ]

    def test_across_calendar_year(self):
        period = make_period(date(2023, 12, 15), date(2024, 2, 10))
        assert period.covered_months() == [
            date(2023, 12, 1),
            date(2024, 1, 1),
            date(2024, 2, 1),
        ]

    def test_recomputed_on_each_call(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        first = period.covered_months()
        first.clear()
        assert len(period.covered_months()) == 3


class TestMonthsWorked:
    """Test fractional months worked and days acquired."""

    def test_partial_months(self):
        """April 15-30 (16/30), May (full), June 1-10 (10/30)."""
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        assert period.months_worked() == Decimal("1.8667")
        assert abs(period.months_worked() - Decimal(16 / 30 + 1 + 10 / 30)) < Decimal("0.0001")

    def test_full_calendar_month(self):
        period = make_period(date(2024, 5, 1), date(2024, 5, 31))
        assert period.months_worked() == Decimal("1.0000")
        assert period.days_acquired() == Decimal("2.5000")

    def test_full_leave_year(self):
        period = make_period(date(2023, 6, 1), date(2024, 5, 31))
        assert period.months_worked() == Decimal("12.0000")
        assert period.days_acquired() == Decimal("30.0000")

    def test_days_acquired_rounds_half_up(self):
        # 2.5 x 1.8667 = 4.66675
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        assert period.days_acquired() == Decimal("4.6668")

    def test_single_day(self):
        period = make_period(date(2024, 5, 15), date(2024, 5, 15))
        assert period.months_worked() == Decimal("0.0323")
        assert period.months_worked() > 0


class TestValuations:
    """Test salary-maintain and 10% valuations."""

    def test_salary_maintain(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        # 1000 / 22 x 4.6668 = 212.127...
        assert period.value_by_salary_maintain() == Decimal("212.13")

    def test_ten_percent_sums_unrounded_shares(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        # 53.333... + 100 + 33.333... = 186.666...
        assert period.value_by_ten_percent() == Decimal("186.67")

    def test_value_due_is_higher_valuation(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        assert period.value_due() == Decimal("212.13")
        assert period.value_due() == max(
            period.value_by_salary_maintain(), period.value_by_ten_percent()
        )

    def test_full_leave_year_values(self):
        period = make_period(date(2023, 6, 1), date(2024, 5, 31))
        assert period.value_by_salary_maintain() == Decimal("1363.64")
        assert period.value_by_ten_percent() == Decimal("1200.00")
        assert period.value_due() == Decimal("1363.64")

    def test_idempotent(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10), salary="987.65")
        assert period.value_due() == period.value_due()
        assert period.value_by_ten_percent() == period.value_by_ten_percent()


class TestProratedSalary:
    """Test salary earned in one month of a period."""

    def test_full_month(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        assert period.prorated_salary(date(2024, 5, 1)) == Decimal("1000")

    def test_partial_month_rounded_to_cents(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        assert period.prorated_salary(date(2024, 4, 1)) == Decimal("533.33")


class TestNaturalEnd:
    """Test the May 31 closing a period's leave-year."""

    def test_start_before_june(self):
        assert natural_end_for(date(2024, 4, 15)) == date(2024, 5, 31)

    def test_start_on_june_first(self):
        assert natural_end_for(date(2024, 6, 1)) == date(2025, 5, 31)

    def test_start_in_december(self):
        assert natural_end_for(date(2023, 12, 15)) == date(2024, 5, 31)

    def test_period_method(self):
        assert make_period(date(2024, 6, 1), date(2024, 8, 20)).natural_end() == date(2025, 5, 31)


class TestImmutability:
    """Periods cannot be changed after construction."""

    def test_frozen(self):
        period = make_period(date(2024, 4, 15), date(2024, 6, 10))
        with pytest.raises(ValidationError):
            period.end_date = date(2024, 7, 1)
