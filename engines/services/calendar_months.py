"""
Calendar Month Helpers

Month arithmetic and half-up rounding shared by the leave engines.
"""

import calendar
from collections.abc import Iterator
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


def round_money(value: Decimal) -> Decimal:
    """Round a monetary amount half-up to 2 decimal places."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_ratio(value: Decimal) -> Decimal:
    """Round a month or day count half-up to 4 decimal places."""
    return value.quantize(FOUR_PLACES, rounding=ROUND_HALF_UP)


def month_start(d: date) -> date:
    return date(d.year, d.month, 1)


def month_end(d: date) -> date:
    return date(d.year, d.month, calendar.monthrange(d.year, d.month)[1])


def month_key(d: date) -> tuple[int, int]:
    """Canonical key used to merge month-indexed schedules."""
    return (d.year, d.month)


def add_months(d: date, months: int) -> date:
    """First day of the month `months` calendar months after the month of `d`."""
    year = d.year + (d.month - 1 + months) // 12
    month = (d.month - 1 + months) % 12 + 1
    return date(year, month, 1)


def iter_months(start: date, end: date) -> Iterator[date]:
    """
    Yield the first day of every month from the month of `start`
    through the month of `end`, inclusive.
    """
    current = month_start(start)
    last = month_start(end)
    while current <= last:
        yield current
        current = add_months(current, 1)


def days_covered(month: date, start: date, end: date) -> tuple[int, int]:
    """
    Count the days of `month` covered by the inclusive span [start, end].

    The span is clipped to the month: it starts at `start` only when `start`
    falls in that month (else on the 1st) and ends at `end` only when `end`
    falls in that month (else on the last day).

    Returns:
        Tuple of (days_covered, days_in_month)
    """
    last_day = month_end(month)
    effective_start = start if month_key(start) == month_key(month) else month_start(month)
    effective_end = end if month_key(end) == month_key(month) else last_day
    return effective_end.day - effective_start.day + 1, last_day.day


def prorate(amount: Decimal, days: int, days_in_month: int) -> Decimal:
    """Share of a monthly amount earned over `days` days (unrounded)."""
    if days >= days_in_month:
        return amount
    return amount * Decimal(days) / Decimal(days_in_month)
