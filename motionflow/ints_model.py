"""A list model over a shared integer sequence, and a source node that feeds it."""

from __future__ import annotations

from typing import Iterator, MutableSequence

DEFAULT_VALUES = (20, 10, 203, 140, 9, 20)


class IntsModel:
    """Row-oriented view onto a mutable list of integers.

    The list is shared, not copied: changes made through the model are seen
    by every other holder of the same list and the other way round.
    """

    def __init__(self, ints: MutableSequence[int] | None = None) -> None:
        self._ints = ints if ints is not None else []

    @property
    def ints(self) -> MutableSequence[int]:
        """The underlying shared list."""
        return self._ints

    def __len__(self) -> int:
        return len(self._ints)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ints)

    def row_count(self) -> int:
        """Number of rows, one per value."""
        return len(self._ints)

    def data(self, row: int) -> int | None:
        """Value shown in ``row``, or None for a row outside the model."""
        if 0 <= row < len(self._ints):
            return self._ints[row]
        return None

    def clear(self) -> None:
        """Remove every value."""
        self._ints.clear()

    def add_value(self, value: int) -> None:
        """Append a value as a new last row."""
        self._ints.append(value)


class IntRemoteSource:
    """Data source producing an editable list of integers once per run."""

    def __init__(self, values: MutableSequence[int] | None = None) -> None:
        self._ints: MutableSequence[int] = (
            list(DEFAULT_VALUES) if values is None else values
        )
        self._model = IntsModel(self._ints)
        self._processed = False

    @property
    def model(self) -> IntsModel:
        """The model presenting the source's values."""
        return self._model

    @property
    def values(self) -> list[int]:
        """A snapshot of the current values."""
        return list(self._ints)

    def add_value(self, value: int) -> None:
        """Append a value to the list the source produces."""
        self._model.add_value(value)

    def clear(self) -> None:
        """Remove every value from the list the source produces."""
        self._model.clear()

    def produce(self) -> list[int]:
        """Emit the current values and mark the source as exhausted."""
        self._processed = True
        return list(self._ints)

    def empty(self) -> bool:
        """True once the values have been produced since the last reset."""
        return self._processed

    def reset(self) -> None:
        """Make the source ready to produce again."""
        self._processed = False