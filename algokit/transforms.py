"""Convolutions via FFT, NTT and the Walsh-Hadamard transform."""

import cmath
import math
from collections.abc import Sequence

__all__ = ["fft_convolve", "ntt_convolve", "walsh_hadamard", "xor_convolve"]

DEFAULT_MOD = 998244353
DEFAULT_ROOT = 3


def _bit_reverse_permute(a: list) -> None:
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]


def _size_for(total: int) -> int:
    size = 1
    while size < total:
        size <<= 1
    return size


def _dft(a: list[complex], roots: list[complex], inverse: bool) -> None:
    size = len(a)
    _bit_reverse_permute(a)
    step = 2
    while step <= size:
        half = step >> 1
        times = size // step
        for j in range(half):
            w = roots[size - times * j] if inverse else roots[times * j]
            for k in range(j, size, step):
                u, v = a[k], a[k + half] * w
                a[k], a[k + half] = u + v, u - v
        step <<= 1
    if inverse:
        for i in range(size):
            a[i] /= size


def fft_convolve(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the linear convolution of ``a`` and ``b`` computed with a complex FFT."""
    if not a or not b:
        return []
    total = len(a) + len(b) - 1
    size = _size_for(total)
    roots = [cmath.exp(2j * math.pi * i / size) for i in range(size + 1)]
    fa = [complex(x) for x in a] + [0j] * (size - len(a))
    fb = [complex(x) for x in b] + [0j] * (size - len(b))
    _dft(fa, roots, inverse=False)
    _dft(fb, roots, inverse=False)
    product = [x * y for x, y in zip(fa, fb)]
    _dft(product, roots, inverse=True)
    return [c.real for c in product[:total]]


def _ntt(a: list[int], mod: int, root: int, inverse: bool) -> None:
    size = len(a)
    _bit_reverse_permute(a)
    mid = 1
    while mid < size:
        step = pow(root, (mod - 1) // (mid * 2), mod)
        if inverse:
            step = pow(step, mod - 2, mod)
        for i in range(0, size, mid * 2):
            w = 1
            for j in range(mid):
                x = a[i + j]
                y = w * a[i + j + mid] % mod
                a[i + j] = (x + y) % mod
                a[i + j + mid] = (x - y) % mod
                w = w * step % mod
        mid <<= 1


def ntt_convolve(
    a: Sequence[int], b: Sequence[int], mod: int = DEFAULT_MOD, root: int = DEFAULT_ROOT
) -> list[int]:
    """Return the convolution of ``a`` and ``b`` modulo the prime ``mod``.

    ``root`` must be a primitive root of ``mod``; ``mod - 1`` must be divisible
    by the transform size.
    """
    if not a or not b:
        return []
    total = len(a) + len(b) - 1
    size = _size_for(total)
    if (mod - 1) % size:
        raise ValueError(f"modulus {mod} does not support a transform of size {size}")
    fa = [x % mod for x in a] + [0] * (size - len(a))
    fb = [x % mod for x in b] + [0] * (size - len(b))
    _ntt(fa, mod, root, inverse=False)
    _ntt(fb, mod, root, inverse=False)
    product = [x * y % mod for x, y in zip(fa, fb)]
    _ntt(product, mod, root, inverse=True)
    inv = pow(size, mod - 2, mod)
    return [x * inv % mod for x in product[:total]]


def _check_power_of_two(n: int) -> None:
    if n < 1 or n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")


def walsh_hadamard(values: Sequence[int], inverse: bool = False) -> list[int]:
    """Return the Walsh-Hadamard transform of ``values`` (length a power of two)."""
    f = list(values)
    n = len(f)
    _check_power_of_two(n)
    half = 1
    while half < n:
        for j in range(0, n, half << 1):
            for k in range(j, j + half):
                x, y = f[k], f[k + half]
                f[k], f[k + half] = x + y, x - y
        half <<= 1
    if inverse:
        f = [x // n for x in f]
    return f


def xor_convolve(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Return ``ans[k] = sum(f[i] * g[j] for i ^ j == k)``."""
    if len(f) != len(g):
        raise ValueError("sequences must have the same length")
    tf = walsh_hadamard(f)
    tg = walsh_hadamard(g)
    return walsh_hadamard([x * y for x, y in zip(tf, tg)], inverse=True)