"""String algorithms: prefix function, KMP search, Z-function, Manacher, inverse BWT."""

from collections.abc import Sequence

__all__ = [
    "failure_function",
    "kmp_search",
    "z_function",
    "manacher",
    "longest_palindrome_length",
    "inverse_bwt",
]


def failure_function(pattern: Sequence) -> list[int]:
    """Return the KMP failure table of ``pattern``.

    The table has ``len(pattern) + 1`` entries; ``fail[i]`` is the length of the
    longest proper border of ``pattern[:i]``.
    """
    m = len(pattern)
    fail = [0] * (m + 1)
    for i in range(1, m):
        j = fail[i]
        while j and pattern[i] != pattern[j]:
            j = fail[j]
        fail[i + 1] = j + 1 if pattern[i] == pattern[j] else 0
    return fail


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Return the start index of every (possibly overlapping) match of ``pattern``."""
    m = len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    fail = failure_function(pattern)
    matches = []
    j = 0
    for i, item in enumerate(text):
        while j and item != pattern[j]:
            j = fail[j]
        if item == pattern[j]:
            j += 1
        if j == m:
            matches.append(i - m + 1)
            j = fail[j]
    return matches


def z_function(s: Sequence) -> list[int]:
    """Return the Z-array: ``z[i]`` is the longest common prefix of ``s[i:]`` and ``s``.

    ``z[0]`` is left as 0.
    """
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        k = max(0, min(right - i + 1, z[i - left]))
        while i + k < n and s[i + k] == s[k]:
            k += 1
        z[i] = k
        if i + k - 1 > right:
            left, right = i, i + k - 1
    return z


def manacher(s: str) -> list[int]:
    """Return palindrome radii over ``s`` interleaved with separators.

    The interleaved string has ``2 * len(s) + 1`` positions; entry ``i`` is the
    largest ``x`` such that positions ``i - x + 1 .. i + x - 1`` form a palindrome.
    """
    expanded: list[object] = [None] * (2 * len(s) + 1)
    expanded[1::2] = list(s)
    size = len(expanded)
    radii = [1] * size
    left = right = 0
    for i in range(size):
        radius = max(min(radii[2 * left - i], right - i), 1) if i < right else 1
        while (
            0 <= i - radius
            and i + radius < size
            and expanded[i - radius] == expanded[i + radius]
        ):
            left, right = i, i + radius
            radius += 1
        radii[i] = radius
    return radii


def longest_palindrome_length(s: str) -> int:
    """Return the length of the longest palindromic substring of ``s``."""
    return max(manacher(s)) - 1


def inverse_bwt(s: str) -> str:
    """Invert a Burrows-Wheeler transform given as the last column of sorted rotations.

    The result is the text of the smallest rotation, read starting just after
    its first character; when the original text ends with a unique smallest
    sentinel, this is the original text itself.
    """
    n = len(s)
    if n == 0:
        return ""
    order = sorted(range(n), key=s.__getitem__)
    first_column = "".join(s[k] for k in order)
    out = []
    ptr = 0
    for _ in range(n):
        ptr = order[ptr]
        out.append(first_column[ptr])
    return "".join(out)