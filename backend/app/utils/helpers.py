"""
Shared helper functions.
Standard library only, so models can import them without cycles.
"""
from datetime import date, datetime, timezone
from typing import Optional, Tuple


def utcnow() -> datetime:
    """Current time, timezone-aware in UTC."""
    return datetime.now(timezone.utc)


def stay_days(admission_date: date, release_date: datetime) -> int:
    """
    Length of stay in whole days.

    The admission date only has day precision, so the discharge moment is
    reduced to its date as well: a same-day discharge is 0.

    Args:
        admission_date: Day the patient was admitted
        release_date: Moment of the discharge

    Returns:
        Number of days (may be zero or negative)
    """
    return (release_date.date() - admission_date).days


def parse_month(value: Optional[str], today: Optional[date] = None) -> Tuple[int, int]:
    """
    Parses a 'YYYY-MM' string.

    Args:
        value: Month string, or None for the current month
        today: Reference day for the default

    Returns:
        (year, month) tuple
    """
    if not value:
        today = today or utcnow().date()
        return today.year, today.month

    try:
        year_str, month_str = value.split("-")
        year, month = int(year_str), int(month_str)
    except ValueError:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")

    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")
    return year, month
