"""Dominator tree construction (Lengauer-Tarjan)."""

__all__ = ["DominatorTree"]


class DominatorTree:
    """Directed graph on nodes ``0 .. n-1`` whose dominator tree is rooted at ``source``."""

    def __init__(self, n: int, source: int) -> None:
        if n <= 0:
            raise ValueError("graph must have at least one node")
        if not 0 <= source < n:
            raise ValueError(f"source {source} out of range")
        self.n = n
        self.source = source
        self._succ: list[list[int]] = [[] for _ in range(n)]
        self._pred: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge ``u -> v``."""
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        self._succ[u].append(v)
        self._pred[v].append(u)

    def _dfs_order(self) -> tuple[list[int], list[int], list[int]]:
        dfn = [0] * self.n
        parent = [-1] * self.n
        order = [self.source]
        dfn[self.source] = 1
        stack = [iter(self._succ[self.source])]
        path = [self.source]
        while stack:
            for v in stack[-1]:
                if dfn[v] == 0:
                    parent[v] = path[-1]
                    order.append(v)
                    dfn[v] = len(order)
                    stack.append(iter(self._succ[v]))
                    path.append(v)
                    break
            else:
                stack.pop()
                path.pop()
        return order, dfn, parent

    def build(self) -> list[int | None]:
        """Return the immediate dominator of each node.

        The source and nodes unreachable from it map to ``None``.
        """
        n = self.n
        order, dfn, parent = self._dfs_order()
        mom = list(range(n))
        best = list(range(n))
        sdom = list(range(n))
        idom = list(range(n))
        bucket: list[list[int]] = [[] for _ in range(n)]

        def evaluate(u: int) -> None:
            path = []
            x = u
            while mom[x] != x:
                path.append(x)
                x = mom[x]
            root = x
            for w in reversed(path):
                p = mom[w]
                if dfn[sdom[best[p]]] < dfn[sdom[best[w]]]:
                    best[w] = best[p]
                mom[w] = root

        for u in reversed(order[1:]):
            for v in self._pred[u]:
                if dfn[v]:
                    evaluate(v)
                    if dfn[sdom[best[v]]] < dfn[sdom[u]]:
                        sdom[u] = sdom[best[v]]
            bucket[sdom[u]].append(u)
            p = parent[u]
            mom[u] = p
            for w in bucket[p]:
                evaluate(w)
                idom[w] = best[w] if dfn[sdom[best[w]]] < dfn[p] else p
            bucket[p].clear()

        for u in order[1:]:
            if idom[u] != sdom[u]:
                idom[u] = idom[idom[u]]

        result: list[int | None] = [None] * n
        for u in order[1:]:
            result[u] = idom[u]
        return result