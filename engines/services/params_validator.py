"""
Simulation Params Validator

Turns raw form values into typed calculation inputs. Checks run in a
fixed order and stop at the first failure, so the user always sees a
single message.
"""

import re
from collections.abc import Mapping
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

from engines.schemas.leave_engine import LeaveCalculationInput

# Collective-agreement salary bounds (inclusive)
SALARY_FLOOR = Decimal("200")
SALARY_CEILING = Decimal("1200")

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
REQUIRED_FIELDS = ("start_date", "end_date", "monthly_salary")


class ValidationFailure(str, Enum):
    """Reasons a simulation request is rejected."""

    MISSING_FIELD = "missing_field"
    DATE_FORMAT = "date_format"
    CHRONOLOGICAL_ORDER = "chronological_order"
    SALARY_NOT_NUMERIC = "salary_not_numeric"
    SALARY_NON_POSITIVE = "salary_non_positive"
    SALARY_OUT_OF_RANGE = "salary_out_of_range"

    def message(
        self,
        salary_floor: Decimal = SALARY_FLOOR,
        salary_ceiling: Decimal = SALARY_CEILING,
    ) -> str:
        if self is ValidationFailure.SALARY_OUT_OF_RANGE:
            return f"Salary must be between {salary_floor} and {salary_ceiling}."
        return FAILURE_MESSAGES[self]


FAILURE_MESSAGES: dict[ValidationFailure, str] = {
    ValidationFailure.MISSING_FIELD: "All fields are required.",
    ValidationFailure.DATE_FORMAT: "Dates must be valid and use the YYYY-MM-DD format.",
    ValidationFailure.CHRONOLOGICAL_ORDER: "The end date must be after the start date.",
    ValidationFailure.SALARY_NOT_NUMERIC: "Salary must be a number.",
    ValidationFailure.SALARY_NON_POSITIVE: "Salary must be a positive number.",
}


def _is_blank(value: object) -> bool:
    return value is None or not str(value).strip()


def _parse_date(value: str) -> date | None:
    if not DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _parse_salary(value: object) -> Decimal | None:
    try:
        salary = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not salary.is_finite():
        return None
    return salary


def validate_simulation_params(
    raw: Mapping[str, object],
    salary_floor: Decimal = SALARY_FLOOR,
    salary_ceiling: Decimal = SALARY_CEILING,
) -> tuple[LeaveCalculationInput | None, ValidationFailure | None]:
    """
    Validate raw simulation params.

    Returns:
        Tuple of (calculation_input, failure). Exactly one is None.
    """
    if any(_is_blank(raw.get(field)) for field in REQUIRED_FIELDS):
        return None, ValidationFailure.MISSING_FIELD

    start_date = _parse_date(str(raw["start_date"]).strip())
    end_date = _parse_date(str(raw["end_date"]).strip())
    if start_date is None or end_date is None:
        return None, ValidationFailure.DATE_FORMAT

    if end_date <= start_date:
        return None, ValidationFailure.CHRONOLOGICAL_ORDER

    salary = _parse_salary(raw["monthly_salary"])
    if salary is None:
        return None, ValidationFailure.SALARY_NOT_NUMERIC
    if salary <= 0:
        return None, ValidationFailure.SALARY_NON_POSITIVE
    if not salary_floor <= salary <= salary_ceiling:
        return None, ValidationFailure.SALARY_OUT_OF_RANGE

    return (
        LeaveCalculationInput(
            contract_start=start_date,
            contract_end=end_date,
            monthly_salary=salary,
        ),
        None,
    )
