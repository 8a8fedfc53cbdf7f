"""Mixed-radix complex FFT with radix 2, 3, 4 and 5 butterflies and a generic fallback."""

import cmath
import math
from typing import List, Sequence, Union

from scopekit.factors import factorize

Number = Union[int, float, complex]


class KissFFT:
    """A planned complex FFT (or unscaled inverse FFT) of a fixed length."""

    def __init__(self, nfft: int, inverse: bool = False) -> None:
        if nfft < 1:
            raise ValueError("nfft must be positive")
        self.nfft = nfft
        self.inverse = bool(inverse)
        sign = 1.0 if self.inverse else -1.0
        self._twiddles: List[complex] = [
            cmath.exp(complex(0.0, sign * 2 * math.pi * i / nfft)) for i in range(nfft)
        ]
        self._factors = factorize(nfft)

    def transform(self, data: Sequence[Number], stride: int = 1) -> List[complex]:
        """Return the transform of ``nfft`` samples read from every ``stride``-th item of ``data``."""
        if stride < 1:
            raise ValueError("stride must be positive")
        needed = (self.nfft - 1) * stride + 1
        if len(data) < needed:
            raise ValueError(
                f"need at least {needed} input samples, got {len(data)}"
            )
        samples = [complex(value) for value in data]
        out: List[complex] = [0j] * self.nfft
        self._work(out, 0, samples, 0, 1, stride, 0)
        return out

    def _work(
        self,
        out: List[complex],
        base: int,
        data: List[complex],
        start: int,
        fstride: int,
        in_stride: int,
        stage: int,
    ) -> None:
        p, m = self._factors[stage]
        step = fstride * in_stride
        if m == 1:
            for k in range(p):
                out[base + k] = data[start + k * step]
        else:
            for k in range(p):
                self._work(out, base + k * m, data, start + k * step,
                           fstride * p, in_stride, stage + 1)

        if p == 2:
            self._butterfly2(out, base, fstride, m)
        elif p == 3:
            self._butterfly3(out, base, fstride, m)
        elif p == 4:
            self._butterfly4(out, base, fstride, m)
        elif p == 5:
            self._butterfly5(out, base, fstride, m)
        else:
            self._butterfly_generic(out, base, fstride, m, p)

    def _butterfly2(self, out: List[complex], base: int, fstride: int, m: int) -> None:
        tw = self._twiddles
        for k in range(m):
            t = out[base + m + k] * tw[k * fstride]
            out[base + m + k] = out[base + k] - t
            out[base + k] += t

    def _butterfly3(self, out: List[complex], base: int, fstride: int, m: int) -> None:
        tw = self._twiddles
        epi3 = tw[fstride * m].imag
        for k in range(m):
            i0, i1, i2 = base + k, base + k + m, base + k + 2 * m
            s1 = out[i1] * tw[k * fstride]
            s2 = out[i2] * tw[2 * k * fstride]
            s3 = s1 + s2
            s0 = (s1 - s2) * epi3
            mid = out[i0] - s3 * 0.5
            out[i0] += s3
            out[i2] = mid - 1j * s0
            out[i1] = mid + 1j * s0

    def _butterfly4(self, out: List[complex], base: int, fstride: int, m: int) -> None:
        tw = self._twiddles
        for k in range(m):
            i0, i1, i2, i3 = base + k, base + k + m, base + k + 2 * m, base + k + 3 * m
            s0 = out[i1] * tw[k * fstride]
            s1 = out[i2] * tw[2 * k * fstride]
            s2 = out[i3] * tw[3 * k * fstride]
            s5 = out[i0] - s1
            first = out[i0] + s1
            s3 = s0 + s2
            s4 = s0 - s2
            out[i2] = first - s3
            out[i0] = first + s3
            if self.inverse:
                out[i1] = s5 + 1j * s4
                out[i3] = s5 - 1j * s4
            else:
                out[i1] = s5 - 1j * s4
                out[i3] = s5 + 1j * s4

    def _butterfly5(self, out: List[complex], base: int, fstride: int, m: int) -> None:
        tw = self._twiddles
        ya = tw[fstride * m]
        yb = tw[fstride * 2 * m]
        for u in range(m):
            i0, i1, i2, i3, i4 = (base + u + j * m for j in range(5))
            s0 = out[i0]
            s1 = out[i1] * tw[u * fstride]
            s2 = out[i2] * tw[2 * u * fstride]
            s3 = out[i3] * tw[3 * u * fstride]
            s4 = out[i4] * tw[4 * u * fstride]

            s7 = s1 + s4
            s10 = s1 - s4
            s8 = s2 + s3
            s9 = s2 - s3

            out[i0] = s0 + s7 + s8

            s5 = s0 + s7 * ya.real + s8 * yb.real
            s6 = complex(
                s10.imag * ya.imag + s9.imag * yb.imag,
                -s10.real * ya.imag - s9.real * yb.imag,
            )
            out[i1] = s5 - s6
            out[i4] = s5 + s6

            s11 = s0 + s7 * yb.real + s8 * ya.real
            s12 = complex(
                -s10.imag * yb.imag + s9.imag * ya.imag,
                s10.real * yb.imag - s9.real * ya.imag,
            )
            out[i2] = s11 + s12
            out[i3] = s11 - s12

    def _butterfly_generic(
        self, out: List[complex], base: int, fstride: int, m: int, p: int
    ) -> None:
        tw = self._twiddles
        n = self.nfft
        for u in range(m):
            scratch = [out[base + u + q * m] for q in range(p)]
            for q1 in range(p):
                k = u + q1 * m
                twidx = 0
                acc = scratch[0]
                for q in range(1, p):
                    twidx += fstride * k
                    if twidx >= n:
                        twidx -= n
                    acc += scratch[q] * tw[twidx]
                out[base + k] = acc