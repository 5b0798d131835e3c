import random
import statistics as stdstats

import pytest

from motionflow.statistics import SampleStatistics


SAMPLES = [3, 9, -4, 12, 7, 0, 5, 21, -8, 2]


def test_mean_matches_reference():
    stats = SampleStatistics(SAMPLES)
    assert stats.mean() == pytest.approx(stdstats.fmean(SAMPLES))


def test_second_moment_is_mean_of_squares():
    stats = SampleStatistics(SAMPLES)
    assert stats.second_moment() == pytest.approx(
        stdstats.fmean([s * s for s in SAMPLES])
    )


def test_min_and_max():
    stats = SampleStatistics(SAMPLES)
    assert stats.min() == min(SAMPLES)
    assert stats.max() == max(SAMPLES)


def test_add_sample_incrementally_equals_constructor():
    incremental = SampleStatistics()
    for sample in SAMPLES:
        incremental.add_sample(sample)
    bulk = SampleStatistics(SAMPLES)
    assert len(incremental) == len(SAMPLES)
    assert incremental.mean() == bulk.mean()
    assert incremental.kurtosis() == bulk.kurtosis()
    assert incremental.median() == bulk.median()


def test_symmetric_samples_have_no_skew():
    stats = SampleStatistics([-3, -1, 0, 1, 3])
    assert stats.skewness() == pytest.approx(0.0, abs=1e-12)


def test_skewness_flips_sign_when_samples_are_negated():
    pos = SampleStatistics(SAMPLES)
    neg = SampleStatistics([-s for s in SAMPLES])
    assert neg.skewness() == pytest.approx(-pos.skewness())


def test_kurtosis_invariant_under_affine_transform():
    base = SampleStatistics(SAMPLES)
    moved = SampleStatistics([3 * s + 11 for s in SAMPLES])
    assert moved.kurtosis() == pytest.approx(base.kurtosis())
    assert moved.skewness() == pytest.approx(base.skewness())


def test_two_point_distribution_kurtosis():
    stats = SampleStatistics([1, -1, 1, -1])
    assert stats.kurtosis() == pytest.approx(-2.0)


def test_constant_samples_give_nan_shape():
    stats = SampleStatistics([4, 4, 4, 4, 4, 4])
    assert stats.mean() == 4
    assert str(stats.kurtosis()) == "nan"
    assert str(stats.skewness()) == "nan"


def test_median_of_five_is_middle_value():
    values = [9, 1, 7, 3, 5]
    stats = SampleStatistics(values)
    assert stats.median() == sorted(values)[2]


def test_median_before_five_samples_is_third_sample():
    stats = SampleStatistics([8, 2, 6])
    assert stats.median() == 6


def test_median_estimate_on_large_stream():
    values = list(range(1, 1002))
    random.Random(42).shuffle(values)
    stats = SampleStatistics(values)
    exact = stdstats.median(values)
    assert abs(stats.median() - exact) < 0.05 * exact
    assert stats.min() <= stats.median() <= stats.max()


def test_copy_is_independent():
    stats = SampleStatistics(SAMPLES)
    clone = stats.copy()
    clone.add_sample(1000)
    assert stats.max() == max(SAMPLES)
    assert clone.max() == 1000
    assert len(clone) == len(stats) + 1


def test_empty_statistics_raise():
    stats = SampleStatistics()
    for getter in (stats.mean, stats.median, stats.min, stats.max, stats.kurtosis):
        with pytest.raises(ValueError):
            getter()


def test_non_numeric_sample_rejected():
    with pytest.raises(TypeError):
        SampleStatistics().add_sample("5")