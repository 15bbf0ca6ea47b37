"""Numeric aggregation helpers shared by the trackers and catalogs."""
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from src.utils.exceptions import EmptyInputError

Number = Union[int, float]


@dataclass(frozen=True)
class LabeledValue:
    """A value paired with an external label (e.g. a day name)."""

    label: str
    value: Number


def _require_values(values: Sequence[Number], operation: str) -> None:
    if len(values) == 0:
        raise EmptyInputError(f"Cannot compute {operation} of an empty sequence")


def maximum(values: Sequence[Number]) -> Number:
    """Return the largest value. Raises EmptyInputError on empty input."""
    _require_values(values, "maximum")
    return max(values)


def minimum(values: Sequence[Number]) -> Number:
    """Return the smallest value. Raises EmptyInputError on empty input."""
    _require_values(values, "minimum")
    return min(values)


def average(values: Sequence[Number]) -> float:
    """
    Calculate the arithmetic mean.

    Args:
        values: Non-empty sequence of numbers

    Returns:
        Sum of values divided by their count

    Raises:
        EmptyInputError: If values is empty
    """
    _require_values(values, "average")
    return sum(values) / len(values)


def above_average(values: Sequence[Number]) -> List[Number]:
    """
    Filter values strictly greater than the average.

    Args:
        values: Non-empty sequence of numbers

    Returns:
        Values above the average, in their original order
    """
    mean = average(values)
    return [value for value in values if value > mean]


def above_average_detailed(labeled_values: Iterable[Tuple[str, Number]]) -> List[LabeledValue]:
    """
    Filter labeled values strictly greater than the average of all values.

    Args:
        labeled_values: Iterable of (label, value) pairs

    Returns:
        LabeledValue entries above the average, in their original order
    """
    entries = [LabeledValue(label=label, value=value) for label, value in labeled_values]
    mean = average([entry.value for entry in entries])
    return [entry for entry in entries if entry.value > mean]
