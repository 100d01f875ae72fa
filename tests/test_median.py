import statistics

import pytest

from algokit.median import running_median


def test_worked_example():
    assert running_median([12, 4, 5, 3, 8, 7]) == [12.0, 8.0, 5.0, 4.5, 5.0, 6.0]


def test_empty():
    assert running_median([]) == []


@pytest.mark.parametrize("value", [0, -5, 17])
def test_single_value(value):
    assert running_median([value]) == [float(value)]


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 4, 5, 6, 7],
        [7, 6, 5, 4, 3, 2, 1],
        [5, 5, 5, 1, 9, 9, 0],
        [-3, 10, -8, 4, 4, 0, 2, -1],
    ],
)
def test_each_prefix_matches_median(values):
    result = running_median(values)
    assert len(result) == len(values)
    for i, median in enumerate(result, start=1):
        assert median == statistics.median(values[:i])


def test_results_are_floats():
    result = running_median([3, 1, 2])
    assert result == [3.0, 2.0, 2.0]
    assert [type(m) for m in result] == [float, float, float]


def test_accepts_iterator():
    values = [4, 2, 8, 6]
    assert running_median(iter(values)) == running_median(values)