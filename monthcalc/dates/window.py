from dataclasses import dataclass
from datetime import date

from monthcalc.dates.months import D, add_months, days_in_month


@dataclass(frozen=True)
class MonthRange:
    start: date
    end: date


def first_day_of_month(d: D) -> D:
    return d.replace(day=1)


def last_day_of_month(d: D) -> D:
    return d.replace(day=days_in_month(d.year, d.month))


def window_start(end_date: D, window_months: int) -> D:
    """
    For an end_date, compute start_date of trailing window:
    end_date shifted back by window_months (callers decide on inclusivity).
    """
    if window_months <= 0:
        raise ValueError("window_months must be > 0")

    return add_months(end_date, -window_months)


def month_ranges(as_of: date, months: int = 12) -> list[MonthRange]:
    """Full calendar months before the month of as_of, oldest first."""
    if months <= 0:
        raise ValueError("months must be > 0")

    start_month = add_months(first_day_of_month(as_of), -months)
    ranges: list[MonthRange] = []

    for i in range(months):
        month_start = add_months(start_month, i)
        ranges.append(MonthRange(start=month_start, end=last_day_of_month(month_start)))

    return ranges
