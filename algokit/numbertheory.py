"""Lucas's theorem, two-squares counts, Burnside's lemma and grid products."""

import math


def lucas_binomial(m, n, p):
    """Return ``C(m, n) mod p`` for a prime ``p`` by Lucas's theorem."""
    if p < 2 or m < 0 or n < 0:
        raise ValueError("need a prime p and non-negative m, n")
    result = 1
    while m or n:
        (m, m_digit), (n, n_digit) = divmod(m, p), divmod(n, p)
        result = result * math.comb(m_digit, n_digit) % p
    return result % p


def sum_of_two_squares_count(n):
    """Return the number of ordered pairs ``(x, y)`` with ``x*x + y*y == n``: 4(D1 - D3)."""
    if n < 1:
        raise ValueError("n must be positive")
    divisors = {d for i in range(1, math.isqrt(n) + 1) if n % i == 0 for d in (i, n // i)}
    return 4 * sum((d % 4 == 1) - (d % 4 == 3) for d in divisors)


def burnside_orbits(fixed_counts):
    """Return the number of orbits: the mean of the fixed-point counts."""
    counts = list(fixed_counts)
    if not counts or sum(counts) % len(counts):
        raise ValueError("fixed-point counts must be non-empty with an integer mean")
    return sum(counts) // len(counts)


def min_grid_product(n):
    """Return the minimum of ``((a + 2) // 2) * ((b + 2) // 2)`` over ``a * b == n``."""
    if n < 1:
        raise ValueError("n must be positive")
    return min(
        ((n // a + 2) // 2) * ((a + 2) // 2)
        for a in range(1, math.isqrt(n) + 1)
        if n % a == 0
    )