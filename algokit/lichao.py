"""Li Chao tree for minimum of lines, and tree DP over subtree jumps."""

import math
import sys


class _Node:
    __slots__ = ("m", "c", "left", "right")

    def __init__(self, m, c):
        self.m, self.c = m, c
        self.left = self.right = None

    def at(self, x):
        return self.m * x + self.c


class LiChaoTree:
    """Minimum of lines ``m * x + c`` over the integer range ``lo .. hi``."""

    def __init__(self, lo, hi):
        if lo > hi:
            raise ValueError("empty range")
        self.lo, self.hi = lo, hi
        self._root = None

    def add_line(self, m, c):
        """Insert the line ``m * x + c``."""
        self._root = self._insert(self._root, m, c, self.lo, self.hi)

    def _insert(self, node, m, c, lo, hi):
        if node is None:
            return _Node(m, c)
        held_lo, held_hi = node.at(lo), node.at(hi)
        new_lo, new_hi = m * lo + c, m * hi + c
        if held_lo <= new_lo and held_hi <= new_hi:
            return node
        if held_lo > new_lo and held_hi > new_hi:
            node.m, node.c = m, c
            return node
        if held_lo > new_lo:
            node.m, node.c, m, c = m, c, node.m, node.c
        mid = (lo + hi) // 2
        if node.at(mid) < m * mid + c:
            node.right = self._insert(node.right, m, c, mid + 1, hi)
        else:
            node.m, node.c, m, c = m, c, node.m, node.c
            node.left = self._insert(node.left, m, c, lo, mid)
        return node

    def query(self, x):
        """Return the minimum value at ``x`` over all lines, or ``math.inf`` if none."""
        if not self.lo <= x <= self.hi:
            raise ValueError(f"x={x} outside {self.lo}..{self.hi}")
        best = math.inf
        node, lo, hi = self._root, self.lo, self.hi
        while node is not None:
            best = min(best, node.at(x))
            if lo == hi:
                break
            mid = (lo + hi) // 2
            if x <= mid:
                node, hi = node.left, mid
            else:
                node, lo = node.right, mid + 1
        return best


def _subtree(root, children):
    stack = [root]
    while stack:
        u = stack.pop()
        yield u
        stack.extend(children[u])


def solve_tree_jumps(a, b, edges):
    """Return the cheapest cost from each node to a leaf of the tree rooted at 0.

    Jumping from ``u`` to a proper descendant ``v`` costs ``a[u] * b[v]``; leaves cost 0.
    """
    n = len(a)
    if len(b) != n:
        raise ValueError("a and b must have the same length")
    if n == 0:
        return []
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    adj = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        adj[u].append(v)
        adj[v].append(u)

    parent = [-1] * n
    children = [[] for _ in range(n)]
    order, stack, seen = [], [0], {0}
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if v not in seen:
                seen.add(v)
                parent[v] = u
                children[u].append(v)
                stack.append(v)
    if len(order) != n:
        raise ValueError("edges do not form a tree")
    size = [1] * n
    for u in reversed(order[1:]):
        size[parent[u]] += size[u]

    trees = [None] * n
    dp = [0] * n
    for u in reversed(order):
        kids = sorted(children[u], key=size.__getitem__, reverse=True)
        if kids:
            tree = trees[kids[0]]
            for light in kids[1:]:
                for v in _subtree(light, children):
                    tree.add_line(b[v], dp[v])
            dp[u] = tree.query(a[u])
            for kid in kids:
                trees[kid] = None
        else:
            tree = LiChaoTree(min(a), max(a))
        tree.add_line(b[u], dp[u])
        trees[u] = tree
    return dp


def main(argv=None):
    """Read ``n``, ``a``, ``b`` and 1-based tree edges; print the cost of every node."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        with open(args[0]) as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    numbers = iter(int(tok) for tok in text.split())
    n = next(numbers)
    a = [next(numbers) for _ in range(n)]
    b = [next(numbers) for _ in range(n)]
    edges = [(next(numbers) - 1, next(numbers) - 1) for _ in range(n - 1)]
    print(" ".join(map(str, solve_tree_jumps(a, b, edges))))
    return 0