"""
Monthly Schedule

Month-by-month salary and paid-leave breakdown of a contract under three
disbursement policies:

1. Lump sum: each period's value is paid once, the month after the period
   ends (always a June), except the last truncated period which is paid
   in the contract's final month.
2. Amortized (1/12): each period's value is spread over the twelve months
   following its natural May 31. The last truncated period is not amortized.
3. Pay as you go: 10% of every month's salary, with a regularization in
   each lump-sum month that trues up the period against its valuation.
"""

from datetime import date
from decimal import Decimal

from engines.schemas.leave_engine import MonthlyDetail, ScheduleTotals
from engines.services.accrual_period import (
    ACCRUED_DAYS_PER_FULL_MONTH,
    TEN_PERCENT,
    WORKING_DAYS_PER_MONTH,
    AccrualPeriod,
)
from engines.services.calendar_months import (
    add_months,
    days_covered,
    iter_months,
    month_key,
    month_start,
    prorate,
    round_money,
)
from engines.services.period_partitioner import build_periods, is_last_truncated

AMORTIZATION_MONTHS = 12

MonthSchedule = dict[tuple[int, int], Decimal]


def _credit(schedule: MonthSchedule, month: date, amount: Decimal) -> None:
    key = month_key(month)
    schedule[key] = schedule.get(key, Decimal("0")) + amount


class MonthlySchedule:
    """
    Salary and leave payments for every calendar month of a contract.

    The contract is partitioned into accrual periods once, at construction.
    Every schedule is recomputed on each call.
    """

    def __init__(self, contract_start: date, contract_end: date, monthly_salary: Decimal):
        self.contract_start = contract_start
        self.contract_end = contract_end
        self.monthly_salary = Decimal(str(monthly_salary))
        self.periods = build_periods(contract_start, contract_end, self.monthly_salary)

    def months(self) -> list[date]:
        return list(iter_months(self.contract_start, self.contract_end))

    def salary_due(self, month: date) -> Decimal:
        """Contract salary for `month`: full when the whole month is worked, else by day ratio."""
        days, days_in_month = days_covered(month, self.contract_start, self.contract_end)
        return round_money(prorate(self.monthly_salary, days, days_in_month))

    def is_last_truncated(self, period: AccrualPeriod) -> bool:
        return is_last_truncated(period, self.contract_end)

    def lump_sum_month(self, period: AccrualPeriod) -> date:
        if self.is_last_truncated(period):
            return month_start(self.contract_end)
        return add_months(period.end_date, 1)

    def lump_sum_schedule(self) -> MonthSchedule:
        schedule: MonthSchedule = {}
        for period in self.periods:
            _credit(schedule, self.lump_sum_month(period), round_money(period.value_due()))
        return schedule

    def amortized_schedule(self) -> MonthSchedule:
        # Installments start after the natural May 31, even for a period
        # truncated at the front, so they always begin in June.
        schedule: MonthSchedule = {}
        for period in self.periods:
            if self.is_last_truncated(period):
                continue
            installment = round_money(period.value_due() / AMORTIZATION_MONTHS)
            first_month = add_months(period.natural_end(), 1)
            for i in range(AMORTIZATION_MONTHS):
                _credit(schedule, add_months(first_month, i), installment)
        return schedule

    def regularization(self, period: AccrualPeriod) -> Decimal:
        """
        True-up owed (or clawed back, when negative) in the period's lump-sum month.

        A regular period is reconciled against its 10% valuation. The last
        truncated period is reconciled against the salary-maintain formula,
        less 10% of a full salary for every month it touches.
        """
        covered = period.covered_months()

        if self.is_last_truncated(period):
            target = round_money(
                (self.monthly_salary / WORKING_DAYS_PER_MONTH)
                * (ACCRUED_DAYS_PER_FULL_MONTH * period.months_worked())
            )
            already_paid = round_money(self.monthly_salary * TEN_PERCENT * len(covered))
        else:
            target = period.value_by_ten_percent()
            already_paid = sum(
                (round_money(period.prorated_salary(month) * TEN_PERCENT) for month in covered),
                Decimal("0"),
            )

        return round_money(target - already_paid)

    def regularization_schedule(self) -> MonthSchedule:
        schedule: MonthSchedule = {}
        for period in self.periods:
            _credit(schedule, self.lump_sum_month(period), self.regularization(period))
        return schedule

    def calculate_monthly_details(self) -> list[MonthlyDetail]:
        """One MonthlyDetail per contract month, in chronological order."""
        lump_sum = self.lump_sum_schedule()
        amortized = self.amortized_schedule()
        regularization = self.regularization_schedule()

        details: list[MonthlyDetail] = []
        for month in self.months():
            key = month_key(month)
            salary_due = self.salary_due(month)
            pay_as_you_go = round_money(salary_due * TEN_PERCENT)
            # Zero outside lump-sum months
            regularization_amount = regularization.get(key, Decimal("0"))

            details.append(
                MonthlyDetail(
                    month=month,
                    salary_due=salary_due,
                    leave_lump_sum=lump_sum.get(key, Decimal("0")),
                    leave_amortized=amortized.get(key, Decimal("0")),
                    leave_pay_as_you_go=pay_as_you_go,
                    leave_regularization=regularization_amount,
                    leave_total_pay_as_you_go=pay_as_you_go + regularization_amount,
                )
            )

        return details


def total_details(details: list[MonthlyDetail]) -> ScheduleTotals:
    """Sum every amount column of a monthly breakdown."""
    totals = {field: Decimal("0") for field in ScheduleTotals.model_fields}
    for detail in details:
        for field in totals:
            totals[field] += getattr(detail, field)
    return ScheduleTotals(**totals)
