"""Radix factorisation and fast FFT size helpers."""

import math
from typing import List, Tuple


def factorize(n: int) -> List[Tuple[int, int]]:
    """Split ``n`` into (radix, remaining length) stages: fours, twos, then primes."""
    if n < 1:
        raise ValueError("n must be positive")
    floor_sqrt = math.isqrt(n)
    stages: List[Tuple[int, int]] = []
    p = 4
    while True:
        while n % p:
            if p == 4:
                p = 2
            elif p == 2:
                p = 3
            else:
                p += 2
            if p > floor_sqrt:
                p = n
        n //= p
        stages.append((p, n))
        if n <= 1:
            return stages


def _is_fast(n: int) -> bool:
    for radix in (2, 3, 5):
        while n % radix == 0:
            n //= radix
    return n <= 1


def next_fast_size(n: int) -> int:
    """Return the smallest k >= n whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be positive")
    while not _is_fast(n):
        n += 1
    return n


def next_fast_size_real(n: int) -> int:
    """Return an even fast size suitable for a real-input transform of length n."""
    if n < 1:
        raise ValueError("n must be positive")
    return next_fast_size((n + 1) >> 1) << 1