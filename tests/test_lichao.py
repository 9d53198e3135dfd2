import io
import math
import random

import pytest

from algokit.lichao import LiChaoTree, main, solve_tree_jumps


@pytest.mark.parametrize("seed", range(8))
def test_query_is_minimum_of_lines(seed):
    rng = random.Random(seed)
    tree = LiChaoTree(-20, 20)
    lines = []
    for _ in range(15):
        m, c = rng.randint(-10, 10), rng.randint(-50, 50)
        lines.append((m, c))
        tree.add_line(m, c)
        for x in range(-20, 21):
            assert tree.query(x) == min(mm * x + cc for mm, cc in lines)


def test_empty_tree_returns_infinity():
    assert LiChaoTree(0, 10).query(5) == math.inf


def test_range_errors():
    with pytest.raises(ValueError):
        LiChaoTree(5, 1)
    tree = LiChaoTree(0, 3)
    tree.add_line(1, 1)
    with pytest.raises(ValueError):
        tree.query(4)


def test_second_sample():
    a = [5, -10, 5, 7]
    b = [-8, -80, -3, -10]
    edges = [(1, 0), (1, 3), (0, 2)]
    assert solve_tree_jumps(a, b, edges) == [-300, 100, 0, 0]


def test_single_node():
    assert solve_tree_jumps([4], [9], []) == [0]


def _descendants(children, u):
    stack = list(children[u])
    while stack:
        v = stack.pop()
        yield v
        stack.extend(children[v])


@pytest.mark.parametrize("seed", range(6))
def test_random_tree_satisfies_recurrence(seed):
    rng = random.Random(seed)
    n = 40
    a = [rng.randint(-30, 30) for _ in range(n)]
    b = [rng.randint(-30, 30) for _ in range(n)]
    parents = [rng.randrange(i) for i in range(1, n)]
    edges = [(p, i) for i, p in enumerate(parents, start=1)]
    dp = solve_tree_jumps(a, b, edges)
    children = [[] for _ in range(n)]
    for i, p in enumerate(parents, start=1):
        children[p].append(i)
    for u in range(n):
        if not children[u]:
            assert dp[u] == 0
        else:
            assert dp[u] == min(dp[v] + a[u] * b[v] for v in _descendants(children, u))


def test_invalid_input():
    with pytest.raises(ValueError):
        solve_tree_jumps([1, 2], [1], [(0, 1)])
    with pytest.raises(ValueError):
        solve_tree_jumps([1, 2, 3], [1, 2, 3], [(0, 1), (0, 1)])