"""Data validation utilities."""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from src.utils.date_utils import allowed_year_range

DAYS_IN_WEEK = 7
MIN_MOVIE_YEAR = 1800
FUTURE_YEAR_MARGIN = 5


def is_blank(value: Any) -> bool:
    """
    Check whether a field value counts as missing.

    None, empty strings and whitespace-only strings are blank.
    Numbers (including 0) are never blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(fields: Dict[str, Any], required: Iterable[str]) -> List[str]:
    """
    List required fields that are absent or blank.

    Args:
        fields: Field name to value mapping
        required: Names that must be present

    Returns:
        Missing field names, in the order given by required
    """
    return [name for name in required if is_blank(fields.get(name))]


def non_text_fields(fields: Dict[str, Any], names: Iterable[str]) -> List[str]:
    """
    List fields that are present but not strings.

    Args:
        fields: Field name to value mapping
        names: Names that must hold text when present

    Returns:
        Offending field names, in the order given by names
    """
    return [name for name in names if name in fields and not isinstance(fields[name], str)]


def normalize_text(value: str) -> str:
    """
    Normalize text for case-insensitive comparison.

    Behavior:
        - Trims leading/trailing whitespace
        - Converts to lowercase
        - Example: " Frank Darabont " → "frank darabont"
    """
    return value.strip().lower()


def validate_day_index(day_index: Any) -> Tuple[bool, str]:
    """
    Validate a 0-based weekday index.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if 0 <= day_index <= 6
        - (False, "Invalid day index. Please use 0-6.") otherwise
    """
    if isinstance(day_index, bool) or not isinstance(day_index, int):
        return False, "Invalid day index. Please use 0-6."
    if day_index < 0 or day_index >= DAYS_IN_WEEK:
        return False, "Invalid day index. Please use 0-6."
    return True, ""


def validate_step_count(steps: Any) -> Tuple[bool, str]:
    """
    Validate a daily step count.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") for a non-negative integer
        - (False, "Step count must be a non-negative integer") otherwise
    """
    if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
        return False, "Step count must be a non-negative integer"
    return True, ""


def parse_year(value: Any) -> Optional[int]:
    """
    Convert a year given as int or integer-valued string.

    Returns:
        The year as int, or None if the value is not an integer year
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def validate_year(value: Any, now: Optional[datetime] = None) -> Tuple[bool, str]:
    """
    Validate a movie release year.

    Args:
        value: Year as int or numeric string
        now: Reference time for the upper bound (defaults to now)

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if MIN_MOVIE_YEAR <= year <= current year + FUTURE_YEAR_MARGIN
        - (False, message) otherwise
    """
    min_year, max_year = allowed_year_range(MIN_MOVIE_YEAR, FUTURE_YEAR_MARGIN, now)
    message = f"Year must be a valid number between {min_year} and {max_year}"

    year = parse_year(value)
    if year is None:
        return False, message
    if year < min_year or year > max_year:
        return False, message
    return True, ""
