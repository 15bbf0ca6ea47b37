"""Unit tests for statistics helpers."""
import pytest

from src.utils.exceptions import EmptyInputError
from src.utils.statistics import (
    LabeledValue,
    above_average,
    above_average_detailed,
    average,
    maximum,
    minimum,
)


class TestMinMax:
    """Test maximum and minimum."""

    def test_maximum(self):
        assert maximum([4500, 6200, 8300, 6700]) == 8300

    def test_minimum(self):
        assert minimum([4500, 6200, 8300, 4900]) == 4500

    def test_single_value(self):
        assert maximum([7]) == 7
        assert minimum([7]) == 7

    @pytest.mark.parametrize("func", [maximum, minimum])
    def test_empty_input_raises_error(self, func):
        """Empty sequence should raise EmptyInputError."""
        with pytest.raises(EmptyInputError):
            func([])


class TestAverage:
    """Test average."""

    def test_average(self):
        assert average([10, 20, 30]) == 20

    def test_average_returns_float(self):
        assert average([1, 2]) == 1.5

    def test_empty_input_raises_error(self):
        with pytest.raises(EmptyInputError, match="average"):
            average([])

    def test_empty_input_is_value_error(self):
        """EmptyInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            average([])

    @pytest.mark.parametrize("values", [
        [4500, 6200, 5800, 7100, 4900, 8300, 6700],
        [-3, 0, 3],
        [5, 5, 5],
        [0.5, 100.25],
    ])
    def test_average_between_min_and_max(self, values):
        assert minimum(values) <= average(values) <= maximum(values)


class TestAboveAverage:
    """Test above-average filtering."""

    def test_keeps_order(self):
        assert above_average([4500, 6200, 5800, 7100, 4900, 8300, 6700]) == [7100, 8300, 6700]

    def test_excludes_values_equal_to_average(self):
        """Values equal to the average are not above it."""
        assert above_average([10, 20, 30]) == [30]

    def test_all_equal_returns_empty(self):
        assert above_average([5, 5, 5]) == []

    def test_empty_input_raises_error(self):
        with pytest.raises(EmptyInputError):
            above_average([])


class TestAboveAverageDetailed:
    """Test labeled above-average filtering."""

    def test_pairs_labels_with_values(self):
        result = above_average_detailed([("Monday", 100), ("Tuesday", 300), ("Wednesday", 200)])
        assert result == [LabeledValue(label="Tuesday", value=300)]

    def test_accepts_generator(self):
        result = above_average_detailed((name, value) for name, value in [("a", 1), ("b", 3), ("c", 5)])
        assert [entry.label for entry in result] == ["c"]

    def test_empty_input_raises_error(self):
        with pytest.raises(EmptyInputError):
            above_average_detailed([])
