"""Date and time utility functions."""
from datetime import datetime
from typing import Optional, Tuple


def current_year(now: Optional[datetime] = None) -> int:
    """
    Get the current calendar year.

    Args:
        now: Reference time (defaults to datetime.now())

    Returns:
        Four-digit year
    """
    return (now or datetime.now()).year


def allowed_year_range(min_year: int, future_margin: int, now: Optional[datetime] = None) -> Tuple[int, int]:
    """
    Build an inclusive (min, max) year range ending future_margin years from now.

    Args:
        min_year: Earliest accepted year
        future_margin: Years past the current year still accepted

    Returns:
        Tuple of (min_year, current_year + future_margin)
    """
    return min_year, current_year(now) + future_margin


def timestamp_now() -> str:
    """Current local time as an ISO 8601 string with offset."""
    return datetime.now().astimezone().isoformat()


def is_iso_timestamp(value: str) -> bool:
    """
    Check if a string parses as an ISO 8601 timestamp.

    Accepts a trailing 'Z' as UTC.
    """
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return False
    return True
