"""Custom exception classes."""
from typing import List, Optional


class ValidationError(Exception):
    """Raised when data fails validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class DuplicateError(Exception):
    """Raised when a record collides with an existing one."""
    pass


class CapacityExceededError(Exception):
    """Raised when a collection is already at capacity."""
    pass


class NotFoundError(Exception):
    """Raised when no record matches the lookup key."""
    pass


class InvalidCategoryError(ValidationError):
    """Raised when a value is outside a closed enumeration."""
    pass


class EmptyInputError(ValueError):
    """Raised when aggregating over zero elements."""
    pass
