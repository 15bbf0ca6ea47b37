"""Daily step record data model."""
from dataclasses import dataclass

from src.utils.exceptions import ValidationError
from src.utils.validation import validate_day_index, validate_step_count

DAYS_OF_WEEK = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)


@dataclass
class DayRecord:
    """Step count for one day of the week."""

    day_index: int
    steps: int

    def __post_init__(self):
        """Validate day record data."""
        is_valid, error_msg = validate_day_index(self.day_index)
        if not is_valid:
            raise ValidationError(error_msg)

        is_valid, error_msg = validate_step_count(self.steps)
        if not is_valid:
            raise ValidationError(error_msg)

    @property
    def day_name(self) -> str:
        """Weekday name, Monday first."""
        return DAYS_OF_WEEK[self.day_index]
