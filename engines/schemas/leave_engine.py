"""
Leave Engine Schemas

Input/output models for paid-leave accrual and payment schedules
of part-year employment contracts.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


class LeaveCalculationInput(BaseModel):
    """
    Input for a paid-leave calculation.

    A contract runs from `contract_start` to `contract_end` (both inclusive)
    at a single fixed monthly salary.
    """

    contract_start: date = Field(..., description="First day of the contract")
    contract_end: date = Field(..., description="Last day of the contract (inclusive)")
    monthly_salary: Decimal = Field(..., gt=0, description="Gross salary for a full month")

    @model_validator(mode="after")
    def check_chronology(self) -> "LeaveCalculationInput":
        if self.contract_end < self.contract_start:
            raise ValueError("contract_end must not be before contract_start")
        return self


class AccrualPeriodSummary(BaseModel):
    """One leave-accrual period with both valuations."""

    start_date: date
    end_date: date
    natural_end: date = Field(..., description="May 31 closing the period's leave-year")

    months_worked: Decimal = Field(..., description="Fractional months worked (4 decimal places)")
    days_acquired: Decimal = Field(..., description="Leave days acquired (4 decimal places)")

    value_by_salary_maintain: Decimal = Field(
        ...,
        description="(monthly salary / 22) x days acquired",
    )
    value_by_ten_percent: Decimal = Field(
        ...,
        description="10% of the gross salary earned over the period",
    )
    value_due: Decimal = Field(..., description="Higher of the two valuations")

    is_last_truncated: bool = Field(
        default=False,
        description="True if the contract ends before this period's natural May 31",
    )


class MonthlyDetail(BaseModel):
    """Salary and leave amounts payable in one calendar month."""

    month: date = Field(..., description="First day of the calendar month")
    salary_due: Decimal = Field(..., description="Prorated salary for the month")

    # Payment policies
    leave_lump_sum: Decimal = Field(
        default=Decimal("0"),
        description="Whole period value paid once (June after the period, or final month)",
    )
    leave_amortized: Decimal = Field(
        default=Decimal("0"),
        description="1/12 of a period value, paid over the following leave-year",
    )
    leave_pay_as_you_go: Decimal = Field(
        default=Decimal("0"),
        description="10% of this month's salary",
    )
    leave_regularization: Decimal = Field(
        default=Decimal("0"),
        description="True-up against the period value, in lump-sum months only",
    )
    leave_total_pay_as_you_go: Decimal = Field(
        default=Decimal("0"),
        description="Pay-as-you-go amount plus regularization",
    )


class ScheduleTotals(BaseModel):
    """Column totals over every month of a contract."""

    salary_due: Decimal = Decimal("0")
    leave_lump_sum: Decimal = Decimal("0")
    leave_amortized: Decimal = Decimal("0")
    leave_pay_as_you_go: Decimal = Decimal("0")
    leave_regularization: Decimal = Decimal("0")
    leave_total_pay_as_you_go: Decimal = Decimal("0")


class LeaveCalculationOutput(BaseModel):
    """Full result of a paid-leave calculation."""

    contract_start: date
    contract_end: date
    monthly_salary: Decimal

    periods: list[AccrualPeriodSummary] = Field(default_factory=list)
    monthly_details: list[MonthlyDetail] = Field(default_factory=list)
    totals: ScheduleTotals = Field(default_factory=ScheduleTotals)
