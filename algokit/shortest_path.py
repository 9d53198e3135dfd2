"""SPFA shortest paths with negative-cycle detection."""

import math
from collections import deque


class NegativeCycleError(ValueError):
    """A negative cycle is reachable from the source."""


def spfa(n, edges, source):
    """Return distances from ``source`` over nodes ``0 .. n-1``; unreachable is ``math.inf``."""
    if not 0 <= source < n:
        raise ValueError(f"source {source} out of range")
    adjacency = [[] for _ in range(n)]
    for u, v, w in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        adjacency[u].append((v, w))
    dist = [math.inf] * n
    used = [0] * n
    dist[source] = 0
    queue, queued = deque([source]), {source}
    while queue:
        u = queue.popleft()
        queued.discard(u)
        for v, w in adjacency[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                used[v] = used[u] + 1
                if used[v] >= n:
                    raise NegativeCycleError("negative cycle reachable from source")
                if v not in queued:
                    queue.append(v)
                    queued.add(v)
    return dist


def has_negative_cycle(n, edges):
    """Return whether the directed graph on ``0 .. n-1`` has a negative cycle."""
    try:
        spfa(n + 1, list(edges) + [(n, v, 0) for v in range(n)], n)
    except NegativeCycleError:
        return True
    return False