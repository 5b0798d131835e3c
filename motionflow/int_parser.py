"""Reading integer sequences from semicolon separated text files."""

from __future__ import annotations

import os
import re
from typing import Iterable

DESCRIPTION = "CSV format"
ACCEPTED_PATTERN = r".*\.csv$"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class IntParseError(ValueError):
    """Raised when a field past the optional header is not a valid integer."""


def accepts(path: str | os.PathLike[str]) -> bool:
    """Whether a file name is one this parser handles."""
    return re.fullmatch(ACCEPTED_PATTERN, os.fspath(path)) is not None


def _to_int(field: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(field):
        raise ValueError(f"bad integer field {field!r}")
    value = int(field)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer {field!r} out of range")
    return value


def parse_ints(lines: Iterable[str] | str) -> list[int]:
    """Collect every integer from ``;``-separated lines.

    The first line may be a header: the first bad field on it ends that line
    quietly, keeping whatever was read before it. A bad field on any later
    line raises IntParseError.
    """
    if isinstance(lines, str):
        lines = lines.split("\n")

    values: list[int] = []
    possibly_header = True
    for number, line in enumerate(lines, start=1):
        line = line.rstrip("\n")
        for field in filter(None, line.split(";")):
            try:
                values.append(_to_int(field))
            except ValueError as exc:
                if possibly_header:
                    possibly_header = False
                    break
                raise IntParseError(
                    f"Error parsing int source file: line {number}: {exc}"
                ) from exc
        possibly_header = False
    return values


def load_ints(path: str | os.PathLike[str]) -> list[int]:
    """Read and parse a file of integers; OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_ints(handle)