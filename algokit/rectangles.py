"""Largest rectangle spanned between two monotone staircases."""

import argparse
import sys
from collections.abc import Sequence

__all__ = ["max_rectangle_area", "main"]

Point = tuple[int, int]


def _area(p: Point, q: Point) -> int:
    return (q[0] - p[0]) * (p[1] - q[1])


def max_rectangle_area(first_steps: Sequence[int], second_steps: Sequence[int]) -> int:
    """Return the largest area with a corner on each staircase, never below 0.

    ``first_steps`` alternates rises and runs; each rise ends at a corner of the
    first staircase. ``second_steps`` alternates runs and rises; each run ends
    at a corner of the second staircase. Both start from the origin.
    """
    first, second = list(first_steps), list(second_steps)
    if len(first) % 2 or len(second) % 2:
        raise ValueError("step sequences must have even length")

    starts: list[Point] = []
    x = y = 0
    for dy, dx in zip(first[::2], first[1::2]):
        y += dy
        starts.append((x, y))
        x += dx

    ends: list[Point] = []
    x = y = 0
    for dx, dy in zip(second[::2], second[1::2]):
        x += dx
        ends.append((x, y))
        y += dy

    if not starts or not ends:
        return 0

    held: list[Point | None] = [None] * (4 * len(ends))

    def beats(p: Point, idx: int, k: int) -> bool:
        current = held[idx]
        return current is None or _area(p, ends[k]) > _area(current, ends[k])

    def insert(p: Point) -> None:
        idx, lo, hi = 1, 0, len(ends) - 1
        while lo != hi:
            mid = (lo + hi) // 2
            if beats(p, idx, mid):
                previous = held[idx]
                held[idx] = p
                if previous is not None:
                    p = previous
                idx, hi = 2 * idx, mid
            else:
                idx, lo = 2 * idx + 1, mid + 1
        if beats(p, idx, lo):
            held[idx] = p

    def query(k: int) -> int:
        best = 0
        idx, lo, hi = 1, 0, len(ends) - 1
        while True:
            current = held[idx]
            if current is not None:
                best = max(best, _area(current, ends[k]))
            if lo == hi:
                return best
            mid = (lo + hi) // 2
            if k <= mid:
                idx, hi = 2 * idx, mid
            else:
                idx, lo = 2 * idx + 1, mid + 1

    for p in starts:
        insert(p)
    return max(query(k) for k in range(len(ends)))


def main(argv=None) -> int:
    """Read two counted step lists and print the largest rectangle area."""
    parser = argparse.ArgumentParser(description="Largest rectangle between two staircases.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = iter(int(tok) for tok in args.input.read().split())
    n = next(numbers)
    first = [next(numbers) for _ in range(n)]
    m = next(numbers)
    second = [next(numbers) for _ in range(m)]
    print(max_rectangle_area(first, second))
    return 0