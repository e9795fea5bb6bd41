"""
Accrual Period

One leave-accrual period of a contract and its two valuations.

Leave accrues at 2.5 working days per full month worked. The period's
value is the higher of:
- salary maintain: (monthly salary / 22 working days) x days acquired
- ten percent: 10% of the gross salary earned over the period
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from engines.services.calendar_months import (
    days_covered,
    iter_months,
    prorate,
    round_money,
    round_ratio,
)

# Fixed by the governing collective agreement
ACCRUED_DAYS_PER_FULL_MONTH = Decimal("2.5")
WORKING_DAYS_PER_MONTH = Decimal("22")
TEN_PERCENT = Decimal("0.10")

# Leave-year runs June 1 to May 31
LEAVE_YEAR_START_MONTH = 6


def natural_end_for(start: date) -> date:
    """May 31 closing the leave-year that contains `start`."""
    if start.month >= LEAVE_YEAR_START_MONTH:
        return date(start.year + 1, 5, 31)
    return date(start.year, 5, 31)


class AccrualPeriod(BaseModel):
    """
    A contiguous span of a contract inside one leave-year.

    Built by the period partitioner. Everything else is derived on demand.
    """

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    monthly_salary: Decimal

    def natural_end(self) -> date:
        return natural_end_for(self.start_date)

    def covered_months(self) -> list[date]:
        """First day of every calendar month touched by the period."""
        return list(iter_months(self.start_date, self.end_date))

    def prorated_salary(self, month: date) -> Decimal:
        """Salary earned in `month` within this period, rounded to cents when partial."""
        days, days_in_month = days_covered(month, self.start_date, self.end_date)
        if days >= days_in_month:
            return self.monthly_salary
        return round_money(prorate(self.monthly_salary, days, days_in_month))

    def months_worked(self) -> Decimal:
        """
        Fractional months worked.

        A fully covered month counts 1.0, a partial month counts
        days covered / days in month.
        """
        total = 0.0
        for month in self.covered_months():
            days, days_in_month = days_covered(month, self.start_date, self.end_date)
            if days >= days_in_month:
                total += 1.0
            else:
                total += days / days_in_month
        return round_ratio(Decimal(repr(total)))

    def days_acquired(self) -> Decimal:
        return round_ratio(ACCRUED_DAYS_PER_FULL_MONTH * self.months_worked())

    def value_by_salary_maintain(self) -> Decimal:
        return round_money(
            (self.monthly_salary / WORKING_DAYS_PER_MONTH) * self.days_acquired()
        )

    def value_by_ten_percent(self) -> Decimal:
        # Monthly shares are summed unrounded; only the total is rounded
        total = Decimal("0")
        for month in self.covered_months():
            days, days_in_month = days_covered(month, self.start_date, self.end_date)
            total += prorate(self.monthly_salary, days, days_in_month) * TEN_PERCENT
        return round_money(total)

    def value_due(self) -> Decimal:
        """The employee receives whichever valuation is higher."""
        return max(self.value_by_salary_maintain(), self.value_by_ten_percent())
