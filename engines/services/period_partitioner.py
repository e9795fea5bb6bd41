"""
Period Partitioner

Splits a contract into chronological leave-accrual periods aligned to the
June 1 - May 31 leave-year.

Rules:
- The first period starts on the contract start and ends on the May 31
  closing its leave-year, or on the contract end if that comes first.
- Each following period starts June 1 and ends May 31 of the next year,
  or on the contract end if that comes first.
"""

from datetime import date
from decimal import Decimal

from engines.services.accrual_period import AccrualPeriod, natural_end_for


def build_periods(
    contract_start: date,
    contract_end: date,
    monthly_salary: Decimal,
) -> list[AccrualPeriod]:
    """
    Partition [contract_start, contract_end] into accrual periods.

    The result is never empty, has no gaps and no overlaps. Assumes
    contract_start <= contract_end.
    """
    first_end = min(contract_end, natural_end_for(contract_start))
    periods = [
        AccrualPeriod(
            start_date=contract_start,
            end_date=first_end,
            monthly_salary=monthly_salary,
        )
    ]

    current_end = first_end
    while current_end < contract_end:
        next_start = max(date(current_end.year, 6, 1), contract_start)
        actual_end = min(contract_end, date(next_start.year + 1, 5, 31))

        periods.append(
            AccrualPeriod(
                start_date=next_start,
                end_date=actual_end,
                monthly_salary=monthly_salary,
            )
        )
        current_end = actual_end

    return periods


def is_last_truncated(period: AccrualPeriod, contract_end: date) -> bool:
    """
    True for the period the contract ends in before its natural May 31.

    Such a period has no following leave-year, so its leave is settled in
    the contract's final month.
    """
    return period.end_date == contract_end and period.end_date < period.natural_end()
