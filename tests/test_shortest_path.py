import math
import random

import pytest

from algokit.shortest_path import NegativeCycleError, has_negative_cycle, spfa


def _check_optimal(n, edges, source, dist):
    assert dist[source] == 0
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w
    for v in range(n):
        if v != source and dist[v] != math.inf:
            assert any(b == v and dist[a] + w == dist[v] for a, b, w in edges)


def test_negative_edge_without_cycle():
    edges = [(0, 1, 4), (0, 2, 1), (2, 1, -2), (1, 3, 1)]
    assert spfa(4, edges, 0) == [0, -1, 1, 0]


def test_unreachable_is_infinite():
    dist = spfa(3, [(0, 1, 5)], 0)
    assert dist[2] == math.inf
    assert dist[1] == 5


@pytest.mark.parametrize("seed", range(5))
def test_random_graph_is_optimal(seed):
    rng = random.Random(seed)
    n = 12
    edges = [(rng.randrange(n), rng.randrange(n), rng.randint(0, 20)) for _ in range(40)]
    dist = spfa(n, edges, 0)
    _check_optimal(n, edges, 0, dist)


def test_negative_cycle_raises():
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1)]
    with pytest.raises(NegativeCycleError):
        spfa(3, edges, 0)


def test_negative_cycle_is_value_error():
    with pytest.raises(ValueError):
        spfa(2, [(0, 1, -1), (1, 0, -1)], 0)


def test_has_negative_cycle_unreachable_from_zero():
    edges = [(1, 2, -5), (2, 1, 2)]
    assert has_negative_cycle(3, edges) is True


def test_has_negative_cycle_false():
    edges = [(0, 1, -2), (1, 2, -3), (0, 2, 1)]
    assert has_negative_cycle(3, edges) is False


def test_bad_edges_and_source():
    with pytest.raises(ValueError):
        spfa(2, [(0, 5, 1)], 0)
    with pytest.raises(ValueError):
        spfa(2, [], 3)