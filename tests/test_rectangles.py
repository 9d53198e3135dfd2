import io
import random

import pytest

from algokit.rectangles import main, max_rectangle_area


def test_single_corners():
    assert max_rectangle_area([2, 3], [4, 1]) == 8


def test_empty_staircase_gives_zero():
    assert max_rectangle_area([], [4, 1]) == 0
    assert max_rectangle_area([2, 3], []) == 0


def test_odd_length_rejected():
    with pytest.raises(ValueError):
        max_rectangle_area([1, 2, 3], [1, 1])
    with pytest.raises(ValueError):
        max_rectangle_area([1, 1], [1])


def _corners(steps, rise_first):
    x = y = 0
    points = []
    for first, second in zip(steps[::2], steps[1::2]):
        if rise_first:
            y += first
            points.append((x, y))
            x += second
        else:
            x += first
            points.append((x, y))
            y += second
    return points


@pytest.mark.parametrize("seed", range(10))
def test_result_is_best_pair(seed):
    rng = random.Random(seed)
    first = [rng.randint(1, 20) for _ in range(2 * rng.randint(1, 12))]
    second = [rng.randint(1, 20) for _ in range(2 * rng.randint(1, 12))]
    result = max_rectangle_area(first, second)
    areas = [
        (q[0] - p[0]) * (p[1] - q[1])
        for p in _corners(first, True)
        for q in _corners(second, False)
    ]
    assert result >= 0
    assert all(result >= area for area in areas)
    assert result == 0 or result in areas


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2 3\n2\n4 1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(max_rectangle_area([2, 3], [4, 1]))