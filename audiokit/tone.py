"""Sine tone generation and interleaved frame filling."""

from __future__ import annotations

import math
from typing import Callable, MutableSequence

__all__ = ["sine_source", "fill_frames"]


def sine_source(sample_rate: float, frequency: float = 440.0) -> Callable[[], float]:
    """Return a callable yielding successive full-scale sine samples.

    The sample clock advances before each sample and wraps at ``sample_rate``.
    """
    if sample_rate <= 0:
        raise ValueError("sample rate must be positive")
    rate = float(sample_rate)
    clock = 0.0

    def next_sample() -> float:
        nonlocal clock
        clock = (clock + 1.0) % rate
        return math.sin(clock * frequency * 2.0 * math.pi / rate)

    return next_sample


def fill_frames(
    output: MutableSequence[float],
    channels: int,
    next_sample: Callable[[], float],
) -> int:
    """Write one sample per frame into every channel of ``output``.

    ``output`` is interleaved; a trailing partial frame is filled too.
    Returns the number of frames written.
    """
    if channels <= 0:
        raise ValueError("channel count must be positive")
    frames = 0
    for start in range(0, len(output), channels):
        value = next_sample()
        stop = min(start + channels, len(output))
        output[start:stop] = [value] * (stop - start)
        frames += 1
    return frames