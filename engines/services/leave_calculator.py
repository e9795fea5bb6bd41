"""
Leave Calculator

Entry point of the paid-leave engine: partitions a contract, values each
accrual period and builds the monthly payment breakdown.
"""

import logging
from datetime import date
from decimal import Decimal

from engines.schemas.leave_engine import (
    AccrualPeriodSummary,
    LeaveCalculationInput,
    LeaveCalculationOutput,
)
from engines.services.accrual_period import AccrualPeriod
from engines.services.monthly_schedule import MonthlySchedule, total_details
from engines.services.period_partitioner import is_last_truncated

logger = logging.getLogger(__name__)


def summarize_period(period: AccrualPeriod, contract_end: date) -> AccrualPeriodSummary:
    return AccrualPeriodSummary(
        start_date=period.start_date,
        end_date=period.end_date,
        natural_end=period.natural_end(),
        months_worked=period.months_worked(),
        days_acquired=period.days_acquired(),
        value_by_salary_maintain=period.value_by_salary_maintain(),
        value_by_ten_percent=period.value_by_ten_percent(),
        value_due=period.value_due(),
        is_last_truncated=is_last_truncated(period, contract_end),
    )


def calculate(
    contract_start: date,
    contract_end: date,
    monthly_salary: Decimal,
) -> LeaveCalculationOutput:
    """
    Compute accrual periods and the monthly payment breakdown of a contract.

    Preconditions (checked by the caller): contract_start <= contract_end
    and monthly_salary > 0.
    """
    schedule = MonthlySchedule(contract_start, contract_end, monthly_salary)
    details = schedule.calculate_monthly_details()

    logger.info(
        f"Leave calculation: {contract_start} -> {contract_end}, "
        f"{len(schedule.periods)} period(s), {len(details)} month(s)"
    )

    return LeaveCalculationOutput(
        contract_start=contract_start,
        contract_end=contract_end,
        monthly_salary=schedule.monthly_salary,
        periods=[summarize_period(p, contract_end) for p in schedule.periods],
        monthly_details=details,
        totals=total_details(details),
    )


def calculate_leave(input_data: LeaveCalculationInput) -> LeaveCalculationOutput:
    """Run `calculate` on a validated input model."""
    return calculate(
        input_data.contract_start,
        input_data.contract_end,
        input_data.monthly_salary,
    )
