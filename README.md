# motionflow

A small library for motion-capture data processing:

- `motionflow.filter_utils` – a `Quaternion` type, `skew_matrix`,
  `hemisphere_align` and `wahba` (Wahba's problem solved by SVD).
- `motionflow.orientation_filter` – orientation estimation from IMU
  readings (`InstantaneousFilter`, `create_filter`).
- `motionflow.quat_common` – distance between quaternion signals and export
  of paired 3-vectors to text.
- `motionflow.statistics` – `SampleStatistics`, running statistics over
  numeric samples.
- `motionflow.int_parser` – reading integers from `;`-separated files.
- `motionflow.processors` – filter, sign-flopping multiply and statistics
  steps over integer lists.
- `motionflow.ints_model` – `IntsModel`, a row view over a shared list, and
  `IntRemoteSource`, a one-shot integer source.
- `motionflow.calibration` – the bind-pose / bow-pose calibration sequence.

It is a library only; there is no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Quaternions

```python
from motionflow.filter_utils import Quaternion, hemisphere_align, skew_matrix, wahba

q = Quaternion(w=1.0, x=0.0, y=0.0, z=0.0)
q.dot(q)                 # 4-D dot product
q.conjugate(); q.inverse()
q * q; q / q             # Hamilton product and multiplication by the inverse
q.rotate((1.0, 0.0, 0.0))
q.negated_coefficients() # same rotation, opposite hemisphere
```

`Quaternion` is a frozen dataclass; `inverse()` and `rotate()` raise
`ZeroDivisionError` for the zero quaternion.

`skew_matrix(x)` returns the 3×3 cross-product matrix, so
`skew_matrix(x) @ y == cross(x, y)`.

`hemisphere_align(q1, q2, q)` returns whichever of `q1`, `q2` has a
non-negative dot product with `q` (`q1` when both do).

`wahba(c, d)` takes two 3×N matrices whose columns are paired observations
and returns the unit quaternion `q` that best satisfies
`d[:, i] == q.rotate(c[:, i])`. It raises `ValueError` for badly shaped
input.

## Orientation filtering

```python
from motionflow.orientation_filter import FilterType, create_filter

filt = create_filter(FilterType.INSTANTANEOUS_KALMAN)   # or "instantaneous_kalman"
q = filt.estimate(
    acc=(0.0, 0.0, 9.81),
    gyro=(0.0, 0.0, 0.0),
    mag=(0.4068, 0.0, -0.9135),
    delta_t=0.01,
)
print(filt.name(), filt.approximate_estimation_delay(), q, filt.state)
```

`InstantaneousFilter` solves Wahba's problem on each frame, matching the
normalised magnetometer and accelerometer readings to fixed references
(gravity `(0, 0, 9.81)`, magnetic field `(0.4068, 0, -0.9135)`), and keeps
the result in the same hemisphere as the previous estimate. Each estimate
depends only on the current accelerometer and magnetometer readings: the
gyroscope reading is checked to be a 3-vector but otherwise unused, and
`delta_t` is ignored. A zero-length accelerometer or magnetometer reading
raises `ValueError`.

`approximate_estimation_delay()` returns 5: call `estimate` at least that
many times after creating or resetting a filter before trusting the result.
`reset()` returns the state to the identity quaternion.

`OrientationFilter` is the abstract base for filters. `create_filter`
raises `ValueError` for an unknown type.

## Quaternion signals

```python
from motionflow.quat_common import dist, export_data

total = dist(src_quats, dest_quats)
export_data("pairs.txt", src_vectors, dest_vectors)
```

`dist` sums `|acos(w)|` of `dest[i] / src[i]` (with `w` clamped to
[-1, 1]) over the common length of the two sequences. `export_data` writes
one line `sx sy sz dx dy dz` per pair of 3-vectors, over their common
length.

## Statistics

```python
from motionflow.statistics import SampleStatistics

stats = SampleStatistics([1, 2, 3, 4])
stats.add_sample(10)
stats.mean(); stats.second_moment(); stats.min(); stats.max()
stats.skewness(); stats.kurtosis(); stats.median()
len(stats); stats.copy()
```

Mean, raw second moment, minimum and maximum are exact. `kurtosis()`
returns the excess kurtosis and `skewness()` the sample skewness; both are
NaN when every sample is equal. `median()` is a streaming P-square estimate
with five markers: before the fifth sample it reports the third sample
received (or 0.0 if fewer than three have arrived), with exactly five it is
exact, and after that it is an approximation. Every statistic raises
`ValueError` when no samples have been added; `add_sample` raises
`TypeError` for anything that is not a real number (booleans included).

## Integer files

```python
from motionflow.int_parser import accepts, load_ints, parse_ints, IntParseError

accepts("data.csv")                  # True: names matching .*\.csv$
parse_ints("a;b\n1;2;3\n4")          # [1, 2, 3, 4]
values = load_ints("data.csv")
```

Fields are separated by `;`; empty fields are skipped. Each field must be a
plain decimal integer (optional sign) within the signed 32-bit range. On
the first line the first bad field ends that line quietly, keeping any
values read before it, so a header line is skipped. A bad field on any
later line raises `IntParseError` (a `ValueError`). `load_ints` raises
`OSError` when the file cannot be opened.

## Integer processors

```python
from motionflow.processors import (
    IntFilterProcessor, non_zero_filter, flop_sign_multiply, compute_statistics,
)

IntFilterProcessor().process([0, 1, 0, 2])                  # [1, 2]
IntFilterProcessor(lambda v: v > 1).process([0, 1, 2, 3])   # [2, 3]
flop_sign_multiply([1, 2, 3], [1, 1, 1])                    # [1, -2, 3]
compute_statistics([1, 2, 3])                               # SampleStatistics
```

`IntFilterProcessor` keeps values its `data_filter` accepts (by default
`non_zero_filter`); setting a non-callable filter raises `TypeError`.
`flop_sign_multiply` multiplies paired values and flips the sign applied to
the next product after every positive product; it covers the shorter input
and returns `None` if either input is empty. `compute_statistics` returns
`None` for an empty sequence.

## List model and source

```python
from motionflow.ints_model import IntsModel, IntRemoteSource

model = IntsModel([1, 2])
model.add_value(3); model.row_count(); model.data(0); model.clear()

source = IntRemoteSource()        # starts with 20, 10, 203, 140, 9, 20
source.add_value(7)
values = source.produce()         # after this, source.empty() is True
source.reset()
```

`IntsModel` shares the list it is given rather than copying it;
`data(row)` returns `None` for a row outside the model. `IntRemoteSource`
presents its values through `source.model`; `produce()` returns a copy of
the current values and marks the source as used until `reset()`.

## Calibration

```python
from motionflow.calibration import CalibrationSequence, CalibrationStage

seq = CalibrationSequence()   # stage START, bind enabled
seq.bind()                    # True: stage BIND_POSE
seq.bow()                     # True: stage BOW_POSE
seq.bow()                     # False: out of order, nothing changes
print(seq.stage, seq.message, seq.bind_enabled, seq.bow_enabled)
```

After `bind()` both actions are reported as disabled; `bow()` still
advances from `BIND_POSE`.

## What this package does not do

- The only orientation filter is `InstantaneousFilter`; there is no
  gyroscope-integrating Kalman filter.
- There are no screens or widgets: `IntsModel`, `IntRemoteSource` and
  `CalibrationSequence` hold state and messages for a user interface to
  show, but draw nothing.
- There is no data-flow engine that connects processors; the processing
  steps are plain functions and classes to be called directly.
- Nothing sends or receives orientations between processes, and no
  motion-capture file formats are read.