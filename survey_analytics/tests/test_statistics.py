import math

import pytest

from survey_analytics.core.statistics.descriptive import (
    calculate_categorical_stats,
    calculate_correlation,
    calculate_mean,
    calculate_median,
    calculate_mode,
    calculate_percentile,
    calculate_standard_deviation,
    calculate_statistical_summary,
    calculate_variance,
    identify_outliers,
)


# -------------------------------------
# 📏 Central tendency / spread
# -------------------------------------
def test_empty_sample_is_zero():
    assert calculate_mean([]) == 0
    assert calculate_median([]) == 0
    assert calculate_mode([]) == 0
    assert calculate_variance([]) == 0
    assert calculate_standard_deviation([]) == 0
    assert calculate_percentile([], 50) == 0


def test_mean_and_median():
    assert calculate_mean([1, 2, 3, 4]) == pytest.approx(2.5)
    assert calculate_median([1, 2, 3, 4]) == pytest.approx(2.5)
    assert calculate_median([3, 1, 2]) == pytest.approx(2)


def test_population_variance():
    values = [2, 4, 4, 4, 5, 5, 7, 9]
    assert calculate_variance(values) == pytest.approx(4.0)
    assert calculate_standard_deviation(values) == pytest.approx(2.0)


@pytest.mark.parametrize(
    "values,expected",
    [
        ([1, 1, 2], 1),
        ([5, 5], 5),
        ([5], 0),
        ([1, 2, 3], 0),
        ([1, 1, 2, 2], 0),
        ([1, 1, 2, 2, 3], [1, 2]),
    ],
)
def test_mode(values, expected):
    assert calculate_mode(values) == expected


# -------------------------------------
# 📐 Percentiles / outliers
# -------------------------------------
def test_percentile_interpolates():
    values = [1, 2, 3, 4]
    assert calculate_percentile(values, 25) == pytest.approx(1.75)
    assert calculate_percentile(values, 50) == pytest.approx(calculate_median(values))
    assert calculate_percentile(values, 100) == pytest.approx(4)


def test_percentile_out_of_range_is_clamped():
    values = [1, 2, 3, 4]
    assert calculate_percentile(values, -10) == pytest.approx(1)
    assert calculate_percentile(values, 150) == pytest.approx(4)


def test_outliers_use_iqr_fences():
    report = identify_outliers([1, 2, 3, 4, 100])
    assert report.q1 == pytest.approx(2)
    assert report.q3 == pytest.approx(4)
    assert report.iqr == pytest.approx(2)
    assert report.lower_bound == pytest.approx(-1)
    assert report.upper_bound == pytest.approx(7)
    assert report.outliers == [100]


def test_outliers_empty():
    assert identify_outliers([]).outliers == []


# -------------------------------------
# 🔗 Correlation
# -------------------------------------
def test_perfect_positive_correlation():
    result = calculate_correlation([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
    assert result.coefficient == pytest.approx(1.0)
    assert result.strength == "muito forte"
    assert result.direction == "positiva"


def test_perfect_negative_correlation():
    result = calculate_correlation([1, 2, 3], [3, 2, 1])
    assert result.coefficient == pytest.approx(-1.0)
    assert result.direction == "negativa"


@pytest.mark.parametrize(
    "x,y",
    [([1, 2, 3], [1, 2]), ([], []), ([1, 2, 3], [5, 5, 5])],
)
def test_degenerate_correlation_is_zero(x, y):
    result = calculate_correlation(x, y)
    assert result.coefficient == 0
    assert result.strength == "muito fraca"
    assert result.direction == "nenhuma"


def test_moderate_correlation_labels():
    result = calculate_correlation([1, 2, 3, 4, 5], [2, 1, 4, 3, 5])
    assert result.coefficient == pytest.approx(0.8)
    assert result.strength == "forte"


# -------------------------------------
# 🧾 Summaries
# -------------------------------------
def test_statistical_summary():
    summary = calculate_statistical_summary([1, 2, 2, 3, 7])
    assert summary.count == 5
    assert summary.mean == pytest.approx(3)
    assert summary.median == pytest.approx(2)
    assert summary.mode == 2
    assert summary.min == 1
    assert summary.max == 7
    assert summary.range == 6
    assert summary.percentiles.p50 == pytest.approx(summary.median)
    assert math.isclose(summary.standard_deviation ** 2, summary.variance)


def test_statistical_summary_empty():
    summary = calculate_statistical_summary([])
    assert summary.count == 0
    assert summary.mean == 0
    assert summary.percentiles.p95 == 0


def test_categorical_stats():
    stats = calculate_categorical_stats(["a", "b", "a", "c"])
    assert stats.frequencies == {"a": 2, "b": 1, "c": 1}
    assert stats.percentages["a"] == pytest.approx(50)
    assert stats.most_frequent == "a"
    assert stats.least_frequent == "c"
    assert stats.unique_count == 3


def test_categorical_stats_empty():
    stats = calculate_categorical_stats([])
    assert stats.frequencies == {}
    assert stats.unique_count == 0
