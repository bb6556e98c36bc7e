import calendar
import operator
from datetime import date
from typing import TypeVar

from monthcalc.observability.logging import log

D = TypeVar("D", bound=date)

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class MonthShiftOverflowError(ValueError, OverflowError):
    pass


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in (year, month), proleptic Gregorian. Works for any integer year."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29

    return _MONTH_LENGTHS[month - 1]


def add_months(ts: D, months: int) -> D:
    """
    Shift ts by N months (negative goes back), keeping day in range for target month.

    Jan 31 + 1 month gives the last day of February. Time of day and tzinfo are
    left untouched. Clamping is lossy: add_months(add_months(t, 1), -1) is not
    always t.
    """
    months = operator.index(months)

    year, month0 = divmod(ts.year * 12 + (ts.month - 1) + months, 12)
    month = month0 + 1
    day = min(ts.day, days_in_month(year, month))

    try:
        return ts.replace(year=year, month=month, day=day)
    except (ValueError, OverflowError) as e:
        log().warning(
            "month_shift_out_of_range",
            source=ts.isoformat(),
            months=months,
            target_year=year,
        )
        raise MonthShiftOverflowError(
            f"Shifting {ts.isoformat()} by {months} months gives year {year}, "
            "which the date type cannot represent"
        ) from e


def with_closest_day(ts: D, day: int) -> D:
    """Set day of month; days past the end of the month snap to its last day."""
    if day < 1:
        raise ValueError("day must be >= 1")

    day = min(day, days_in_month(ts.year, ts.month))
    return ts.replace(day=day)
