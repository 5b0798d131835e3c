"""Processing steps over integer sequences."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from motionflow.statistics import SampleStatistics

DataFilter = Callable[[int], bool]


def non_zero_filter(value: int) -> bool:
    """Keep every value except zero."""
    return value != 0


class IntFilterProcessor:
    """Keeps the values that a predicate accepts."""

    def __init__(self, data_filter: DataFilter = non_zero_filter) -> None:
        self.data_filter = data_filter

    @property
    def data_filter(self) -> DataFilter:
        """The predicate deciding which values pass."""
        return self._data_filter

    @data_filter.setter
    def data_filter(self, data_filter: DataFilter) -> None:
        if not callable(data_filter):
            raise TypeError("data filter must be callable")
        self._data_filter = data_filter

    def process(self, values: Iterable[int]) -> list[int]:
        """Return the accepted values in their original order."""
        return [value for value in values if self._data_filter(value)]


def flop_sign_multiply(first: Sequence[int], second: Sequence[int]) -> list[int] | None:
    """Multiply paired values, flipping the sign after every positive product.

    Returns None, producing nothing, when either input is empty. The output
    is as long as the shorter input.
    """
    if not first or not second:
        return None
    result = []
    sign = 1
    for a, b in zip(first, second):
        value = a * b * sign
        sign = -1 if value > 0 else 1
        result.append(value)
    return result


def compute_statistics(values: Sequence[int]) -> SampleStatistics | None:
    """Statistics over the values, or None when there are none."""
    if not values:
        return None
    return SampleStatistics(values)