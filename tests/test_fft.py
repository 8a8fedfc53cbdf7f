import cmath
import math

import pytest

from scopekit.fft import KissFFT

SIZES = [1, 2, 3, 4, 5, 6, 7, 8, 12, 16, 30, 49, 60, 64, 77, 128]


def _signal(n):
    return [complex(math.sin(0.3 * i) + 0.5 * i % 3, math.cos(0.7 * i) - 0.1 * i) for i in range(n)]


def _close(a, b, tol=1e-7):
    assert len(a) == len(b)
    scale = max(1.0, max((abs(v) for v in b), default=1.0))
    for x, y in zip(a, b):
        assert abs(x - y) <= tol * scale


def test_worked_example_length_four():
    result = KissFFT(4).transform([1, 2, 3, 4])
    _close(result, [10, -2 + 2j, -2, -2 - 2j])


@pytest.mark.parametrize("n", SIZES)
def test_impulse_gives_flat_spectrum(n):
    data = [1] + [0] * (n - 1)
    _close(KissFFT(n).transform(data), [1] * n)


@pytest.mark.parametrize("n", SIZES)
def test_constant_concentrates_in_dc(n):
    result = KissFFT(n).transform([2.0] * n)
    _close(result, [2.0 * n] + [0] * (n - 1))


@pytest.mark.parametrize("n", [8, 9, 25, 30, 49, 64])
def test_complex_exponential_lands_in_its_bin(n):
    k = 3 % n
    data = [cmath.exp(2j * math.pi * k * i / n) for i in range(n)]
    expected = [0j] * n
    expected[k] = n
    _close(KissFFT(n).transform(data), expected)


@pytest.mark.parametrize("n", [8, 9, 25, 30, 49, 64])
def test_inverse_exponential_sign(n):
    k = 2
    data = [cmath.exp(-2j * math.pi * k * i / n) for i in range(n)]
    expected = [0j] * n
    expected[k] = n
    _close(KissFFT(n, inverse=True).transform(data), expected)


@pytest.mark.parametrize("n", SIZES)
def test_inverse_round_trip_scales_by_n(n):
    data = _signal(n)
    spectrum = KissFFT(n).transform(data)
    back = KissFFT(n, inverse=True).transform(spectrum)
    _close([v / n for v in back], data)


@pytest.mark.parametrize("n", SIZES)
def test_parseval(n):
    data = _signal(n)
    spectrum = KissFFT(n).transform(data)
    time_energy = sum(abs(v) ** 2 for v in data)
    freq_energy = sum(abs(v) ** 2 for v in spectrum) / n
    assert freq_energy == pytest.approx(time_energy, rel=1e-9)


def test_linearity():
    n = 60
    fft = KissFFT(n)
    a = _signal(n)
    b = [complex(i % 7, -(i % 4)) for i in range(n)]
    combined = fft.transform([2 * x + 3j * y for x, y in zip(a, b)])
    expected = [2 * x + 3j * y for x, y in zip(fft.transform(a), fft.transform(b))]
    _close(combined, expected)


def test_real_input_is_hermitian():
    n = 1024
    data = [math.sin(0.01 * i) + (i % 5) for i in range(n)]
    spectrum = KissFFT(n).transform(data)
    for k in range(1, n):
        assert abs(spectrum[k] - spectrum[n - k].conjugate()) < 1e-6


def test_stride_reads_every_nth_sample():
    n = 12
    data = [complex(i, i * i % 5) for i in range(3 * n)]
    fft = KissFFT(n)
    _close(fft.transform(data, stride=3), fft.transform(data[::3]))


def test_input_is_not_modified():
    data = [1.0, 2.0, 3.0, 4.0, 5.0]
    KissFFT(5).transform(data)
    assert data == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_output_length_matches_nfft_with_longer_input():
    result = KissFFT(4).transform([1, 0, 0, 0, 9, 9])
    _close(result, [1, 1, 1, 1])


@pytest.mark.parametrize("n", [0, -3])
def test_invalid_length_rejected(n):
    with pytest.raises(ValueError):
        KissFFT(n)


def test_short_input_rejected():
    with pytest.raises(ValueError):
        KissFFT(8).transform([1, 2, 3])


def test_short_strided_input_rejected():
    with pytest.raises(ValueError):
        KissFFT(4).transform([0] * 6, stride=2)


def test_zero_stride_rejected():
    with pytest.raises(ValueError):
        KissFFT(4).transform([0] * 4, stride=0)