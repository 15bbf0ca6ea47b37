"""Weekly step-count tracker."""
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from src.models.day_record import DAYS_OF_WEEK, DayRecord
from src.utils.exceptions import ValidationError
from src.utils.statistics import (
    LabeledValue,
    above_average,
    above_average_detailed,
    average,
    maximum,
    minimum,
)
from src.utils.validation import DAYS_IN_WEEK, validate_day_index, validate_step_count

logger = logging.getLogger(__name__)

DEFAULT_WEEK_STEPS = (4500, 6200, 5800, 7100, 4900, 8300, 6700)


class WeeklyStepTracker:
    """Seven fixed day records, Monday through Sunday, updated in place."""

    def __init__(self, initial_steps: Optional[Sequence[int]] = None):
        steps = DEFAULT_WEEK_STEPS if initial_steps is None else tuple(initial_steps)
        if len(steps) != DAYS_IN_WEEK:
            raise ValidationError(f"Expected {DAYS_IN_WEEK} daily step counts, got {len(steps)}")

        self._days: List[DayRecord] = [
            DayRecord(day_index=index, steps=count) for index, count in enumerate(steps)
        ]

    @property
    def days(self) -> Tuple[DayRecord, ...]:
        return tuple(replace(day) for day in self._days)

    @property
    def steps(self) -> Tuple[int, ...]:
        return tuple(day.steps for day in self._days)

    def get_day(self, day_index: int) -> DayRecord:
        """
        Bounds-checked accessor.

        Raises:
            ValidationError: If day_index is outside 0-6
        """
        is_valid, error_msg = validate_day_index(day_index)
        if not is_valid:
            raise ValidationError(error_msg)
        return replace(self._days[day_index])

    def update_steps(self, day_index: int, steps: int) -> DayRecord:
        """
        Set the step count for a day (0 = Monday).

        Args:
            day_index: Day index 0-6
            steps: Non-negative step count

        Returns:
            The updated DayRecord

        Raises:
            ValidationError: Invalid index or step count
        """
        is_valid, error_msg = validate_day_index(day_index)
        if not is_valid:
            logger.warning(f"Rejected step update: {error_msg}")
            raise ValidationError(error_msg)

        day = self._days[day_index]

        is_valid, error_msg = validate_step_count(steps)
        if not is_valid:
            logger.warning(f"Rejected step update for {day.day_name}: {error_msg}")
            raise ValidationError(error_msg)

        day.steps = steps
        logger.info(f"Updated {day.day_name}: {steps} steps")
        return replace(day)

    def highest_steps(self) -> int:
        return maximum(self.steps)

    def lowest_steps(self) -> int:
        return minimum(self.steps)

    def average_steps(self) -> float:
        return average(self.steps)

    def above_average_steps(self) -> List[int]:
        return above_average(self.steps)

    def above_average_days(self) -> List[LabeledValue]:
        """Days above the weekly average, labeled by day name."""
        return above_average_detailed((day.day_name, day.steps) for day in self._days)

    def summary(self) -> Dict[str, Any]:
        """Weekly figures for display."""
        return {
            "days": [(DAYS_OF_WEEK[day.day_index], day.steps) for day in self._days],
            "highest": self.highest_steps(),
            "lowest": self.lowest_steps(),
            "average": self.average_steps(),
            "above_average": self.above_average_days(),
        }
