"""Running descriptive statistics over a stream of numeric samples."""

from __future__ import annotations

import bisect
import math
from numbers import Real
from typing import Iterable

_MEDIAN_PROBABILITY = 0.5


class SampleStatistics:
    """Accumulates samples one at a time and reports summary statistics.

    Mean and moments are exact. The median is a streaming P-square estimate
    kept with five markers: it is exact for up to five samples once five have
    arrived, and an approximation afterwards. Before the fifth sample the
    estimator reports its middle marker, which holds the third sample
    received (or zero if fewer than three have arrived).
    """

    def __init__(self, samples: Iterable[Real] = ()) -> None:
        p = _MEDIAN_PROBABILITY
        self._count = 0
        self._sum = 0
        self._sum2 = 0
        self._sum3 = 0
        self._sum4 = 0
        self._min: Real | None = None
        self._max: Real | None = None
        self._heights = [0.0] * 5
        self._positions = [1.0, 2.0, 3.0, 4.0, 5.0]
        self._desired = [1.0, 1.0 + 2.0 * p, 1.0 + 4.0 * p, 3.0 + 2.0 * p, 5.0]
        self._increments = [0.0, p / 2.0, p, (1.0 + p) / 2.0, 1.0]
        for sample in samples:
            self.add_sample(sample)

    def __len__(self) -> int:
        return self._count

    def copy(self) -> SampleStatistics:
        """Return an independent copy of the accumulated state."""
        other = SampleStatistics()
        other._count = self._count
        other._sum = self._sum
        other._sum2 = self._sum2
        other._sum3 = self._sum3
        other._sum4 = self._sum4
        other._min = self._min
        other._max = self._max
        other._heights = list(self._heights)
        other._positions = list(self._positions)
        other._desired = list(self._desired)
        other._increments = list(self._increments)
        return other

    def add_sample(self, sample: Real) -> None:
        """Add one sample to every statistic."""
        if isinstance(sample, bool) or not isinstance(sample, Real):
            raise TypeError(f"sample must be a real number, not {type(sample).__name__}")
        self._count += 1
        self._sum += sample
        self._sum2 += sample**2
        self._sum3 += sample**3
        self._sum4 += sample**4
        self._min = sample if self._min is None else min(self._min, sample)
        self._max = sample if self._max is None else max(self._max, sample)
        self._update_median(float(sample))

    def _update_median(self, sample: float) -> None:
        heights = self._heights
        positions = self._positions
        if self._count <= 5:
            heights[self._count - 1] = sample
            if self._count == 5:
                heights.sort()
            return

        if sample < heights[0]:
            heights[0] = sample
            cell = 1
        elif heights[4] <= sample:
            heights[4] = sample
            cell = 4
        else:
            cell = bisect.bisect_right(heights, sample)

        for i in range(cell, 5):
            positions[i] += 1.0
        self._desired = [d + inc for d, inc in zip(self._desired, self._increments)]

        for i in range(1, 4):
            d = self._desired[i] - positions[i]
            if (d >= 1.0 and positions[i + 1] - positions[i] > 1.0) or (
                d <= -1.0 and positions[i - 1] - positions[i] < -1.0
            ):
                sign = 1 if d > 0 else -1
                hp = (positions[i + 1] - positions[i] - sign) * (
                    heights[i] - heights[i - 1]
                ) / (positions[i] - positions[i - 1])
                hp += (positions[i] - positions[i - 1] + sign) * (
                    heights[i + 1] - heights[i]
                ) / (positions[i + 1] - positions[i])
                hp = heights[i] + sign * hp / (positions[i + 1] - positions[i - 1])
                if heights[i - 1] < hp < heights[i + 1]:
                    heights[i] = hp
                else:
                    heights[i] = heights[i] + sign * (heights[i + sign] - heights[i]) / (
                        positions[i + sign] - positions[i]
                    )
                positions[i] += sign

    def _require_samples(self) -> None:
        if self._count == 0:
            raise ValueError("no samples have been added")

    def _raw_moment(self, total: Real) -> float:
        return total / self._count

    def mean(self) -> float:
        """Arithmetic mean of the samples."""
        self._require_samples()
        return self._raw_moment(self._sum)

    def second_moment(self) -> float:
        """Raw second moment: the mean of the squared samples."""
        self._require_samples()
        return self._raw_moment(self._sum2)

    def _variance(self) -> float:
        m = self.mean()
        return self._raw_moment(self._sum2) - m * m

    def kurtosis(self) -> float:
        """Excess kurtosis; NaN when every sample is the same."""
        self._require_samples()
        m = self.mean()
        m2 = self._raw_moment(self._sum2)
        m3 = self._raw_moment(self._sum3)
        m4 = self._raw_moment(self._sum4)
        variance = m2 - m * m
        if variance == 0:
            return math.nan
        fourth = m4 - 4.0 * m * m3 + 6.0 * m * m * m2 - 3.0 * m**4
        return fourth / (variance * variance) - 3.0

    def skewness(self) -> float:
        """Sample skewness; NaN when every sample is the same."""
        self._require_samples()
        m = self.mean()
        m2 = self._raw_moment(self._sum2)
        m3 = self._raw_moment(self._sum3)
        variance = m2 - m * m
        if variance == 0:
            return math.nan
        third = m3 - 3.0 * m * m2 + 2.0 * m**3
        return third / variance**1.5

    def max(self) -> Real:
        """Largest sample seen."""
        self._require_samples()
        return self._max

    def min(self) -> Real:
        """Smallest sample seen."""
        self._require_samples()
        return self._min

    def median(self) -> float:
        """Streaming P-square estimate of the median."""
        self._require_samples()
        return self._heights[2]