"""Username cleaning and validation for the student messaging portal."""
import re
from typing import Dict, Iterable, Union

from src.models.username import UsernameResult, UsernameValidation
from src.utils.exceptions import EmptyInputError

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 20

_WHITESPACE_RUN = re.compile(r"\s+")
_ALLOWED_CHARS = re.compile(r"[a-z0-9_]*")
_LETTER = re.compile(r"[a-z]")


def clean_username(raw: str) -> str:
    """
    Normalize a username.

    Behavior:
        - Trims leading/trailing whitespace
        - Converts to lowercase
        - Replaces each run of internal whitespace with one underscore
        - Example: "  TEST  USER  NAME  " → "test_user_name"
    """
    cleaned = raw.strip()
    cleaned = cleaned.lower()
    return _WHITESPACE_RUN.sub("_", cleaned)


def is_letter(char: str) -> bool:
    """True if char is exactly one ASCII letter (either case)."""
    return len(char) == 1 and _LETTER.fullmatch(char.lower()) is not None


def validate_username(name: str) -> UsernameValidation:
    """
    Check a cleaned username against every rule.

    Rules (all evaluated, failures collected in this order):
        - at least USERNAME_MIN_LENGTH characters
        - at most USERNAME_MAX_LENGTH characters
        - starts with a letter (an empty name does not)
        - only lowercase letters, digits and underscores

    Returns:
        UsernameValidation with is_valid and the ordered reasons
    """
    reasons = []

    if len(name) < USERNAME_MIN_LENGTH:
        reasons.append(f"Username must be at least {USERNAME_MIN_LENGTH} characters long.")
    if len(name) > USERNAME_MAX_LENGTH:
        reasons.append(f"Username must be at most {USERNAME_MAX_LENGTH} characters long.")

    first_char = name[:1]
    if not is_letter(first_char):
        reasons.append("Username must start with a letter.")

    if _ALLOWED_CHARS.fullmatch(name) is None:
        reasons.append("Username can only contain letters, numbers, and underscores.")

    return UsernameValidation(is_valid=len(reasons) == 0, reasons=reasons)


def process_username(raw: str) -> UsernameResult:
    """Clean raw input and validate the cleaned form."""
    cleaned = clean_username(raw)
    validation = validate_username(cleaned)
    return UsernameResult(
        original=raw,
        cleaned=cleaned,
        is_valid=validation.is_valid,
        errors=validation.reasons,
    )


def summarize_usernames(raws: Iterable[str]) -> Dict[str, Union[int, float]]:
    """
    Process a batch of usernames and tally the outcome.

    Returns:
        Dict with total, valid, invalid and success_rate (0-100)

    Raises:
        EmptyInputError: If raws is empty
    """
    results = [process_username(raw) for raw in raws]
    if not results:
        raise EmptyInputError("No usernames to summarize")

    valid = sum(1 for result in results if result.is_valid)
    return {
        "total": len(results),
        "valid": valid,
        "invalid": len(results) - valid,
        "success_rate": (valid / len(results)) * 100.0,
    }
