import math

import pytest

from motionflow.filter_utils import Quaternion
from motionflow.quat_common import dist, export_data


def _about_z(angle):
    return Quaternion(math.cos(angle / 2), 0.0, 0.0, math.sin(angle / 2))


def test_identical_signals_have_zero_distance():
    signal = [_about_z(0.1), _about_z(0.7), Quaternion(0.5, 0.5, 0.5, 0.5)]
    assert dist(signal, signal) == pytest.approx(0.0, abs=1e-7)


def test_empty_signal_distance_is_zero():
    assert dist([], [_about_z(1.0)]) == 0.0


def test_opposite_quaternion_distance_is_pi():
    q = Quaternion(1.0, 0.0, 0.0, 0.0)
    assert dist([q], [q.negated_coefficients()]) == pytest.approx(math.pi)


@pytest.mark.parametrize("angle", [0.2, 1.0, 2.5])
def test_distance_is_half_rotation_angle(angle):
    identity = Quaternion()
    assert dist([identity], [_about_z(angle)]) == pytest.approx(angle / 2)


def test_distance_uses_common_prefix():
    a = [Quaternion(), Quaternion()]
    b = [_about_z(1.0)]
    assert dist(a, b) == pytest.approx(dist(a[:1], b))


def test_distance_is_symmetric():
    a = [_about_z(0.3), _about_z(1.2)]
    b = [_about_z(-0.4), _about_z(2.0)]
    assert dist(a, b) == pytest.approx(dist(b, a))


def test_export_writes_space_separated_rows(tmp_path):
    path = tmp_path / "out.txt"
    export_data(path, [(1, 2, 3), (1.5, -2, 0)], [(4, 5, 6), (7, 8, 9)])
    assert path.read_text().splitlines() == ["1 2 3 4 5 6", "1.5 -2 0 7 8 9"]


def test_export_truncates_to_shorter(tmp_path):
    path = tmp_path / "out.txt"
    export_data(path, [(1, 1, 1)] * 3, [(2, 2, 2)])
    assert path.read_text() == "1 1 1 2 2 2\n"


def test_export_empty_creates_empty_file(tmp_path):
    path = tmp_path / "out.txt"
    export_data(path, [], [(1, 2, 3)])
    assert path.read_text() == ""