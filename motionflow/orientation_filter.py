"""Orientation filters that fuse IMU readings into a quaternion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence

import numpy as np

from motionflow.filter_utils import Quaternion, hemisphere_align, wahba

DEFAULT_DELTA_T = 1.0 / 100.0


class FilterType(Enum):
    """Available orientation filter implementations."""

    INSTANTANEOUS_KALMAN = "instantaneous_kalman"


class OrientationFilter(ABC):
    """Quaternion orientation estimator fed with accelerometer, gyroscope and magnetometer data."""

    @abstractmethod
    def name(self) -> str:
        """Internal name of the filter."""

    @abstractmethod
    def reset(self) -> None:
        """Return the filter to its initial state."""

    @abstractmethod
    def approximate_estimation_delay(self) -> int:
        """Number of estimates after creation or reset that may be unstable."""

    @abstractmethod
    def estimate(
        self,
        acc: Sequence[float],
        gyro: Sequence[float],
        mag: Sequence[float],
        delta_t: float = DEFAULT_DELTA_T,
    ) -> Quaternion:
        """Estimate orientation from one set of sensor readings taken ``delta_t`` seconds apart."""


def _vector(values: Sequence[float]) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (3,):
        raise ValueError("sensor readings must be 3-vectors")
    return array


def _unit(values: Sequence[float]) -> np.ndarray:
    array = _vector(values)
    length = np.linalg.norm(array)
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return array / length


class InstantaneousFilter(OrientationFilter):
    """Frame-by-frame estimator solving Wahba's problem on gravity and magnetic field."""

    UNCERTAIN_FRAMES = 5
    GRAVITY_REFERENCE = (0.0, 0.0, 9.81)
    MAGNETIC_REFERENCE = (0.4068, 0.0, -0.9135)

    def __init__(self) -> None:
        self.reset()

    @property
    def state(self) -> Quaternion:
        """The most recent orientation estimate."""
        return self._state

    def name(self) -> str:
        return type(self).__name__

    def reset(self) -> None:
        self._gravity = np.array(self.GRAVITY_REFERENCE, dtype=float)
        self._magnetic = np.array(self.MAGNETIC_REFERENCE, dtype=float)
        self._state = Quaternion(1.0, 0.0, 0.0, 0.0)

    def approximate_estimation_delay(self) -> int:
        return self.UNCERTAIN_FRAMES

    def estimate(
        self,
        acc: Sequence[float],
        gyro: Sequence[float],
        mag: Sequence[float],
        delta_t: float = DEFAULT_DELTA_T,
    ) -> Quaternion:
        _vector(gyro)
        measured = np.column_stack((_unit(mag), _unit(acc)))
        reference = np.column_stack((_unit(self._magnetic), _unit(self._gravity)))
        q = wahba(measured, reference)
        self._state = hemisphere_align(q, q.negated_coefficients(), self._state)
        return self._state


def create_filter(filter_type: FilterType | str) -> OrientationFilter:
    """Create a fresh filter of the given type; raises ValueError for unknown types."""
    kind = FilterType(filter_type)
    if kind is FilterType.INSTANTANEOUS_KALMAN:
        return InstantaneousFilter()
    raise ValueError(f"unsupported filter type: {filter_type!r}")