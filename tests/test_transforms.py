import pytest

from algokit.transforms import fft_convolve, ntt_convolve, walsh_hadamard, xor_convolve


def test_fft_square_of_binomial():
    assert [round(x) for x in fft_convolve([1, 1], [1, 1])] == [1, 2, 1]


def test_fft_identity():
    result = fft_convolve([1], [3, 4, 5])
    assert result == pytest.approx([3, 4, 5], abs=1e-9)


def test_fft_agrees_with_ntt():
    a = [3, 1, 4, 1, 5, 9, 2, 6]
    b = [2, 7, 1, 8, 2, 8]
    assert [round(x) for x in fft_convolve(a, b)] == ntt_convolve(a, b)


def test_fft_commutative_and_length():
    a = [0.5, -1.5, 2.0]
    b = [4.0, 0.25]
    ab = fft_convolve(a, b)
    assert len(ab) == len(a) + len(b) - 1
    assert ab == pytest.approx(fft_convolve(b, a), abs=1e-9)


def test_fft_empty():
    assert fft_convolve([], [1, 2]) == []


def test_ntt_sum_property():
    a = [5, 0, 7, 11, 13]
    b = [17, 19, 23]
    result = ntt_convolve(a, b)
    assert sum(result) % 998244353 == sum(a) * sum(b) % 998244353


def test_ntt_other_prime_from_table():
    a = [1, 2, 3]
    b = [4, 5]
    assert ntt_convolve(a, b, 7681, 17) == ntt_convolve(a, b)


def test_ntt_single_terms():
    assert ntt_convolve([6], [7]) == [42]


def test_ntt_reduces_modulo():
    assert ntt_convolve([998244353 + 2], [1]) == [2]


def test_ntt_unsupported_size():
    with pytest.raises(ValueError):
        ntt_convolve([1, 2, 3, 4], [1, 2, 3, 4, 5], mod=7, root=3)


@pytest.mark.parametrize("values", [[1], [3, -4], [1, 2, 3, 4], [5, 0, -2, 7, 1, 1, 9, -8]])
def test_walsh_round_trip(values):
    assert walsh_hadamard(walsh_hadamard(values), inverse=True) == values


def test_walsh_first_entry_is_sum():
    values = [2, 7, 1, 8, 2, 8, 1, 8]
    assert walsh_hadamard(values)[0] == sum(values)


def test_walsh_rejects_bad_length():
    with pytest.raises(ValueError):
        walsh_hadamard([1, 2, 3])


def test_xor_convolve_delta():
    n = 8
    for i in range(n):
        for j in range(n):
            f = [1 if k == i else 0 for k in range(n)]
            g = [1 if k == j else 0 for k in range(n)]
            assert xor_convolve(f, g) == [1 if k == i ^ j else 0 for k in range(n)]


def test_xor_convolve_identity_and_sum():
    f = [3, 1, 4, 1]
    g = [5, 9, 2, 6]
    assert xor_convolve(f, [1, 0, 0, 0]) == f
    assert sum(xor_convolve(f, g)) == sum(f) * sum(g)


def test_xor_convolve_length_mismatch():
    with pytest.raises(ValueError):
        xor_convolve([1, 2], [1, 2, 3, 4])