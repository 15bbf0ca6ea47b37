"""Username validation result models."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class UsernameValidation:
    """Outcome of the username rules, with every failed rule listed."""

    is_valid: bool
    reasons: List[str] = field(default_factory=list)


@dataclass
class UsernameResult:
    """Raw input, its cleaned form and the validation outcome."""

    original: str
    cleaned: str
    is_valid: bool
    errors: List[str] = field(default_factory=list)
