"""Additive oscillator producing sine, square, saw and triangle waves."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

__all__ = ["Waveform", "Oscillator", "waveform_for_elapsed"]


class Waveform(Enum):
    """Shapes the oscillator can produce."""

    SINE = "sine"
    SQUARE = "square"
    SAW = "saw"
    TRIANGLE = "triangle"


@dataclass
class Oscillator:
    """Band-limited oscillator built from harmonics below the Nyquist frequency."""

    sample_rate: float
    waveform: Waveform = Waveform.SINE
    current_sample_index: float = 0.0
    frequency_hz: float = 440.0

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        if self.frequency_hz <= 0:
            raise ValueError("frequency must be positive")

    def advance_sample(self) -> None:
        """Step the phase index by one sample, wrapping at the sample rate."""
        self.current_sample_index = (self.current_sample_index + 1.0) % self.sample_rate

    def _sine_at(self, freq: float) -> float:
        return math.sin(self.current_sample_index * freq * 2.0 * math.pi / self.sample_rate)

    def _above_nyquist(self, multiple: float) -> bool:
        return self.frequency_hz * multiple > self.sample_rate / 2.0

    def _generative(self, harmonic_step: int, gain_exponent: float) -> float:
        self.advance_sample()
        output = 0.0
        harmonic = 1
        while not self._above_nyquist(harmonic):
            gain = 1.0 / harmonic**gain_exponent
            output += gain * self._sine_at(self.frequency_hz * harmonic)
            harmonic += harmonic_step
        return output

    def sine_wave(self) -> float:
        """Advance and return the next sine sample."""
        self.advance_sample()
        return self._sine_at(self.frequency_hz)

    def square_wave(self) -> float:
        """Advance and return the next square sample (odd harmonics, 1/n gain)."""
        return self._generative(2, 1.0)

    def saw_wave(self) -> float:
        """Advance and return the next saw sample (all harmonics, 1/n gain)."""
        return self._generative(1, 1.0)

    def triangle_wave(self) -> float:
        """Advance and return the next triangle sample (odd harmonics, 1/n^2 gain)."""
        return self._generative(2, 2.0)

    def tick(self) -> float:
        """Advance and return the next sample of the current waveform."""
        generators = {
            Waveform.SINE: self.sine_wave,
            Waveform.SQUARE: self.square_wave,
            Waveform.SAW: self.saw_wave,
            Waveform.TRIANGLE: self.triangle_wave,
        }
        return generators[self.waveform]()


def waveform_for_elapsed(seconds: float) -> Waveform:
    """Return the demo schedule's waveform for ``seconds`` since start."""
    if seconds < 1.0:
        return Waveform.SINE
    if seconds < 2.0:
        return Waveform.TRIANGLE
    if seconds < 3.0:
        return Waveform.SQUARE
    if seconds < 4.0:
        return Waveform.SAW
    return Waveform.SINE