"""Comparison and export helpers for orientation signals."""

from __future__ import annotations

import math
import os
from typing import Sequence

from motionflow.filter_utils import Quaternion


def dist(src: Sequence[Quaternion], dest: Sequence[Quaternion]) -> float:
    """Sum of ``|acos(w)|`` of the relative rotation ``dest[i] / src[i]``.

    Only the common prefix of the two signals is compared.
    """
    total = 0.0
    for s, d in zip(src, dest):
        w = (d / s).w
        total += abs(math.acos(max(min(w, 1.0), -1.0)))
    return total


def export_data(
    path: str | os.PathLike[str],
    src: Sequence[Sequence[float]],
    dest: Sequence[Sequence[float]],
) -> None:
    """Write paired 3-vectors as lines ``sx sy sz dx dy dz`` over their common length."""
    with open(path, "w", encoding="utf-8") as out:
        for s, d in zip(src, dest):
            values = (*s[:3], *d[:3])
            out.write(" ".join(f"{v:g}" for v in values) + "\n")