from datetime import date, datetime, timezone


def _as_utc(value: date) -> date:
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc)

    return value


def years_since(a: date, b: date) -> int:
    """
    Whole years elapsed from b to a, truncated toward zero.

    Positive when a is later than b, negative when earlier. Aware datetimes are
    compared in UTC; only the calendar date counts, time of day is ignored.
    """
    a = _as_utc(a)
    b = _as_utc(b)

    if (a.year, a.month, a.day) < (b.year, b.month, b.day):
        return -years_since(b, a)

    years = a.year - b.year
    # anniversary not reached yet in a's year
    if (a.month, a.day) < (b.month, b.day):
        years -= 1

    return years
