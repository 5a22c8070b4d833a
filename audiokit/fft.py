"""Radix-2 Cooley-Tukey fast Fourier transform."""

from __future__ import annotations

import cmath
import math
from typing import Iterable, List

__all__ = ["fft", "fft_real"]


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def fft(data: Iterable[complex], inverse: bool = False) -> List[complex]:
    """Return the (inverse, normalised) discrete Fourier transform of ``data``.

    The length must be a power of two; sequences of length 0 or 1 are
    returned unchanged.
    """
    out = [complex(x) for x in data]
    n = len(out)
    if n <= 1:
        return out
    if not _is_power_of_two(n):
        raise ValueError("FFT size must be power of 2")

    # Bit-reversal permutation.
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            out[i], out[j] = out[j], out[i]

    sign = 1.0 if inverse else -1.0
    length = 2
    while length <= n:
        half = length // 2
        wlen = cmath.exp(complex(0.0, sign * 2.0 * math.pi / length))
        for start in range(0, n, length):
            w = complex(1.0, 0.0)
            for k in range(start, start + half):
                u = out[k]
                v = out[k + half] * w
                out[k] = u + v
                out[k + half] = u - v
                w *= wlen
        length <<= 1

    if inverse:
        out = [c / n for c in out]
    return out


def fft_real(samples: Iterable[float]) -> List[complex]:
    """Return the forward transform of real-valued ``samples``.

    The number of samples must be a power of two.
    """
    values = [float(s) for s in samples]
    if not _is_power_of_two(len(values)):
        raise ValueError("FFT size must be power of 2")
    return fft(values)