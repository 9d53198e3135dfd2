"""Maximum flow (Dinic, ISAP) and min-cost max-flow on small integer networks.

Each network has ``n`` ordinary nodes ``0 .. n-1`` plus a source ``n`` and a
sink ``n + 1``, exposed as the ``source`` and ``sink`` attributes.
"""

import math
from collections import Counter, deque

__all__ = ["Dinic", "ISAP", "MinCostMaxFlow"]


class _Network:
    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("node count must be non-negative")
        self.n = n
        self.source = n
        self.sink = n + 1
        self.size = n + 2

    def _check_edge(self, u: int, v: int, cap) -> None:
        for node in (u, v):
            if not 0 <= node < self.size:
                raise ValueError(f"node {node} out of range")
        if cap < 0:
            raise ValueError("capacity must be non-negative")


class Dinic(_Network):
    """Dinic's algorithm; calling :meth:`max_flow` again returns only the added flow."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._to: list[int] = []
        self._cap: list = []
        self._flow: list = []
        self._adj: list[list[int]] = [[] for _ in range(self.size)]

    def add_edge(self, u: int, v: int, cap) -> None:
        """Add a directed edge ``u -> v`` with capacity ``cap``."""
        self._check_edge(u, v, cap)
        for a, b, c in ((u, v, cap), (v, u, 0)):
            self._adj[a].append(len(self._to))
            self._to.append(b)
            self._cap.append(c)
            self._flow.append(0)

    def _residual(self, e: int):
        return self._cap[e] - self._flow[e]

    def _levels(self) -> list[int]:
        level = [-1] * self.size
        level[self.source] = 0
        queue = deque([self.source])
        while queue:
            x = queue.popleft()
            for e in self._adj[x]:
                y = self._to[e]
                if level[y] < 0 and self._residual(e) > 0:
                    level[y] = level[x] + 1
                    queue.append(y)
        return level

    def _blocking_flow(self, level: list[int]):
        cur = [0] * self.size
        total = 0
        while True:
            path: list[int] = []
            u = self.source
            while u != self.sink:
                arcs = self._adj[u]
                while cur[u] < len(arcs):
                    e = arcs[cur[u]]
                    if level[self._to[e]] == level[u] + 1 and self._residual(e) > 0:
                        break
                    cur[u] += 1
                else:
                    if u == self.source:
                        return total
                    level[u] = -1
                    e = path.pop()
                    u = self._to[e ^ 1]
                    cur[u] += 1
                    continue
                e = arcs[cur[u]]
                path.append(e)
                u = self._to[e]
            pushed = min(self._residual(e) for e in path)
            for e in path:
                self._flow[e] += pushed
                self._flow[e ^ 1] -= pushed
            total += pushed

    def max_flow(self):
        """Push as much flow as possible from source to sink and return the amount pushed."""
        total = 0
        while True:
            level = self._levels()
            if level[self.sink] < 0:
                return total
            total += self._blocking_flow(level)


class ISAP(_Network):
    """Improved shortest augmenting path with the gap heuristic."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        # Each arc is [target, residual capacity, index of reverse arc].
        self._adj: list[list[list]] = [[] for _ in range(self.size)]

    def add_edge(self, u: int, v: int, cap) -> None:
        """Add a directed edge ``u -> v`` with capacity ``cap``."""
        self._check_edge(u, v, cap)
        self._adj[u].append([v, cap, len(self._adj[v])])
        self._adj[v].append([u, 0, len(self._adj[u]) - 1])

    def max_flow(self):
        """Push as much flow as possible from source to sink and return the amount pushed."""
        size, s, t, adj = self.size, self.source, self.sink, self._adj
        dist = [0] * size
        gap = Counter({0: size})
        it = [0] * size
        path: list[tuple[int, int]] = []
        total = 0
        u = s
        while dist[s] < size:
            if u == t:
                pushed = min(adj[x][i][1] for x, i in path)
                for x, i in path:
                    arc = adj[x][i]
                    arc[1] -= pushed
                    adj[arc[0]][arc[2]][1] += pushed
                total += pushed
                path.clear()
                u = s
                continue
            arcs = adj[u]
            while it[u] < len(arcs):
                v, cap, _ = arcs[it[u]]
                if cap > 0 and dist[u] == dist[v] + 1:
                    break
                it[u] += 1
            else:
                gap[dist[u]] -= 1
                if gap[dist[u]] == 0:
                    break
                dist[u] += 1
                it[u] = 0
                gap[dist[u]] += 1
                if path:
                    u, _ = path.pop()
                    it[u] += 1
                continue
            path.append((u, it[u]))
            u = arcs[it[u]][0]
        return total


class MinCostMaxFlow(_Network):
    """Successive shortest paths (SPFA) min-cost max-flow; no negative cycles allowed."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        # Each arc is [target, residual capacity, cost, index of reverse arc].
        self._adj: list[list[list]] = [[] for _ in range(self.size)]

    def add_edge(self, u: int, v: int, cap, cost) -> None:
        """Add a directed edge ``u -> v`` with capacity ``cap`` and unit ``cost``."""
        self._check_edge(u, v, cap)
        self._adj[u].append([v, cap, cost, len(self._adj[v])])
        self._adj[v].append([u, 0, -cost, len(self._adj[u]) - 1])

    def solve(self) -> tuple:
        """Return ``(flow, cost)`` of a maximum flow of minimum cost."""
        size, s, t, adj = self.size, self.source, self.sink, self._adj
        total_flow = 0
        total_cost = 0
        while True:
            dist = [math.inf] * size
            in_queue = [False] * size
            prev: list[tuple[int, int] | None] = [None] * size
            dist[s] = 0
            queue = deque([s])
            in_queue[s] = True
            while queue:
                u = queue.popleft()
                in_queue[u] = False
                for i, (v, cap, cost, _) in enumerate(adj[u]):
                    if cap > 0 and dist[v] > dist[u] + cost:
                        dist[v] = dist[u] + cost
                        prev[v] = (u, i)
                        if not in_queue[v]:
                            queue.append(v)
                            in_queue[v] = True
            if prev[t] is None:
                return total_flow, total_cost
            path = []
            u = t
            while u != s:
                x, i = prev[u]
                path.append(adj[x][i])
                u = x
            pushed = min(arc[1] for arc in path)
            for arc in path:
                arc[1] -= pushed
                adj[arc[0]][arc[3]][1] += pushed
            total_flow += pushed
            total_cost += pushed * dist[t]