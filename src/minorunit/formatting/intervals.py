"""Human-readable recurrence phrases for subscription prices."""

from __future__ import annotations

from minorunit.enums import Interval

__all__ = ["interval_text"]

# StrEnum members hash like their values, so plain strings match these keys.
_PER_INTERVAL: dict[str, str] = {
    Interval.DAY: "per day",
    Interval.WEEK: "per week",
    Interval.MONTH: "per month",
    Interval.YEAR: "per year",
}

_EVERY_N_INTERVALS: dict[str, str] = {
    Interval.DAY: "every {count} days",
    Interval.WEEK: "every {count} weeks",
    Interval.MONTH: "every {count} months",
    Interval.YEAR: "every {count} years",
}


def interval_text(interval: Interval | str, interval_count: int = 1) -> str:
    """Describe a billing interval.

    Args:
        interval: "day", "week", "month" or "year" (case-sensitive).
        interval_count: Number of intervals between charges.

    Returns:
        "per month" for a count of 1, "every 3 months" otherwise, or ""
        when the interval is not recognized.

    Examples:
        >>> interval_text("month")
        'per month'
        >>> interval_text(Interval.WEEK, 2)
        'every 2 weeks'
        >>> interval_text("fortnight")
        ''
    """
    if interval_count == 1:
        return _PER_INTERVAL.get(interval, "")
    template = _EVERY_N_INTERVALS.get(interval)
    if template is None:
        return ""
    return template.format(count=interval_count)
