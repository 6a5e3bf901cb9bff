"""Enumerations for minorunit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so Interval.MONTH == "month".

Python 3.13+.
"""

from enum import StrEnum


class Interval(StrEnum):
    """Billing interval of a recurring price.

    Values match the interval names used by payment APIs
    (Stripe's ``recurring.interval``).
    """

    DAY = "day"
    """Billed daily: "per day", "every 3 days" """

    WEEK = "week"
    """Billed weekly: "per week", "every 2 weeks" """

    MONTH = "month"
    """Billed monthly: "per month", "every 6 months" """

    YEAR = "year"
    """Billed yearly: "per year", "every 2 years" """


__all__ = [
    "Interval",
]
