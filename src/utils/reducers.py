"""Corrected fold/any-match helpers from the debugging exercise."""
from functools import reduce
from typing import Sequence, Union

from src.utils.exceptions import EmptyInputError

Number = Union[int, float]


def sum_average(numbers: Sequence[Number]) -> float:
    """
    Average a list by folding an additive accumulator seeded at 0.

    Raises:
        EmptyInputError: If numbers is empty
    """
    if len(numbers) == 0:
        raise EmptyInputError("Cannot average an empty list")
    total = reduce(lambda acc, num: acc + num, numbers, 0)
    return total / len(numbers)


def longest_word(text: str) -> str:
    """
    Find the longest word in a space-separated string.

    Words are split on single spaces. A later word replaces the current
    candidate only when it is strictly longer, so the first word of the
    maximal length wins.
    """
    words = text.split(" ")
    return reduce(lambda a, b: b if len(b) > len(a) else a, words)


def any_above_threshold(numbers: Sequence[Number], threshold: Number) -> bool:
    """True iff at least one element is >= threshold."""
    return any(num >= threshold for num in numbers)


def check_pass(marks: Sequence[Number], pass_mark: Number = 50) -> str:
    """Return "Pass" if any mark reaches pass_mark, otherwise "Fail"."""
    if any_above_threshold(marks, pass_mark):
        return "Pass"
    return "Fail"
