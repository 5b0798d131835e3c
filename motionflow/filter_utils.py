"""Quaternion arithmetic and vector-observation helpers for orientation filters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Quaternion:
    """A quaternion stored as scalar part ``w`` and vector part ``(x, y, z)``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def coefficients(self) -> tuple[float, float, float, float]:
        """The coefficients in ``(w, x, y, z)`` order."""
        return (self.w, self.x, self.y, self.z)

    @property
    def vector(self) -> np.ndarray:
        """The vector part as a numpy array."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def dot(self, other: Quaternion) -> float:
        """Four-dimensional dot product with another quaternion."""
        return (
            self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z
        )

    def norm(self) -> float:
        """Euclidean length of the coefficient vector."""
        return math.sqrt(self.dot(self))

    def negated_coefficients(self) -> Quaternion:
        """Negate every coefficient; the result describes the same rotation."""
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def conjugate(self) -> Quaternion:
        """Quaternion with the vector part negated."""
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse; raises ZeroDivisionError for the zero quaternion."""
        squared = self.dot(self)
        if squared == 0.0:
            raise ZeroDivisionError("zero quaternion has no inverse")
        c = self.conjugate()
        return Quaternion(c.w / squared, c.x / squared, c.y / squared, c.z / squared)

    def __mul__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def __truediv__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self * other.inverse()

    def rotate(self, vector: Sequence[float]) -> np.ndarray:
        """Apply the rotation ``q v q*`` to a 3-vector (the quaternion is normalised first)."""
        length = self.norm()
        if length == 0.0:
            raise ZeroDivisionError("zero quaternion describes no rotation")
        unit = Quaternion(self.w / length, self.x / length, self.y / length, self.z / length)
        v = np.asarray(vector, dtype=float).reshape(3)
        rotated = unit * Quaternion(0.0, *v) * unit.conjugate()
        return rotated.vector


def skew_matrix(x: Sequence[float]) -> np.ndarray:
    """Cross-product matrix of ``x``: ``skew_matrix(x) @ y == cross(x, y)``."""
    a, b, c = np.asarray(x, dtype=float).reshape(3)
    return np.array(
        [
            [0.0, -c, b],
            [c, 0.0, -a],
            [-b, a, 0.0],
        ]
    )


def hemisphere_align(q1: Quaternion, q2: Quaternion, q: Quaternion) -> Quaternion:
    """Pick whichever of ``q1`` and ``q2`` lies in the same hemisphere as ``q``."""
    result = q1
    if q1.dot(q) < 0.0:
        result = q2
    if q2.dot(q) < 0.0:
        result = q1
    return result


def wahba(c: Sequence[Sequence[float]], d: Sequence[Sequence[float]]) -> Quaternion:
    """Solve Wahba's problem for paired unit vectors.

    ``c`` and ``d`` are 3xN matrices whose columns are corresponding
    observations. The returned unit quaternion ``q`` best satisfies
    ``d[:, i] == q.rotate(c[:, i])`` for every column.
    """
    cm = np.asarray(c, dtype=float)
    dm = np.asarray(d, dtype=float)
    if cm.ndim != 2 or cm.shape[0] != 3 or cm.shape[1] < 1:
        raise ValueError("observations must be a 3xN matrix")
    if cm.shape != dm.shape:
        raise ValueError("observation matrices must have the same shape")

    blocks = []
    for cc, dd in zip(cm.T, dm.T):
        block = np.zeros((4, 4))
        block[0, 1:4] = cc - dd
        block[1:4, 1:4] = skew_matrix(cc + dd)
        block[1:4, 0] = dd - cc
        blocks.append(block)
    stacked = np.vstack(blocks)

    _, _, vh = np.linalg.svd(stacked, full_matrices=False)
    w, x, y, z = vh[-1]
    return Quaternion(float(w), float(x), float(y), float(z))