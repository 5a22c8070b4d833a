"""Spectral analysis of sample streams and terminal rendering of spectrograms."""

from __future__ import annotations

import math
import time
from typing import Callable, List, Optional, Sequence, Tuple

from audiokit.fft import fft_real

__all__ = [
    "FFT_SIZE",
    "HISTORY_ROWS",
    "ROW_UPDATE_INTERVAL",
    "HIGH_FREQ_BOOST",
    "MIN_DB",
    "MAX_DB",
    "FftAnalyzer",
    "SpectrogramDisplay",
    "value_to_rgb",
    "resample_bins",
]

FFT_SIZE = 1024
"""Default analysis window, in samples; a power of two."""

HISTORY_ROWS = 200
"""Default number of spectrogram rows kept."""

ROW_UPDATE_INTERVAL = 0.05
"""Seconds between new spectrogram rows."""

HIGH_FREQ_BOOST = 1.0
"""Extra weight given to the highest frequency column."""

MIN_DB = -60.0
MAX_DB = 0.0

_CURSOR_HOME = "\x1b[H"
_RESET_COLOR = "\x1b[0m"
_CLEAR_TO_EOL = "\x1b[0K"
_BLOCK = "\u2588"
_TITLE = "Audio Spectrogram (Press CTRL+C to quit)"


def _color(r: int, g: int, b: int) -> str:
    return f"\x1b[38;2;{r};{g};{b}m"


def value_to_rgb(value: float) -> Tuple[int, int, int]:
    """Map a level in 0..1 to a black-purple-white heat-map colour."""
    value = min(max(value, 0.0), 1.0)
    if value < 0.5:
        t = value * 2.0
        level = int(127.0 * t)
        return level, 0, level
    t = (value - 0.5) * 2.0
    edge = int(127.0 + 128.0 * t)
    return edge, int(255.0 * t), edge


def resample_bins(bins: Sequence[float], target_width: int) -> List[float]:
    """Average ``bins`` down (or stretch them) to ``target_width`` columns."""
    if not bins or target_width == 0:
        return [0.0] * target_width
    if len(bins) == target_width:
        return list(bins)

    step = len(bins) / target_width
    resampled = []
    for i in range(target_width):
        start = int(i * step)
        end = min(int((i + 1) * step), len(bins))
        chunk = bins[start:end]
        resampled.append(sum(chunk) / len(chunk) if chunk else 0.0)
    return resampled


class FftAnalyzer:
    """Collects samples and yields Hann-windowed magnitude spectra."""

    def __init__(self, size: int = FFT_SIZE) -> None:
        if size < 2 or size & (size - 1):
            raise ValueError("FFT size must be a power of 2 of at least 2")
        self.size = size
        self._buffer = [0.0] * size
        self._position = 0

    def add_sample(self, sample: float) -> Optional[List[float]]:
        """Add one sample; return the magnitudes of the positive bins when a window fills."""
        self._buffer[self._position] = sample
        self._position += 1
        if self._position < self.size:
            return None
        self._position = 0

        n = float(self.size)
        windowed = [
            s * (0.5 - 0.5 * math.cos(2.0 * math.pi * i / (n - 1.0)))
            for i, s in enumerate(self._buffer)
        ]
        spectrum = fft_real(windowed)
        return [abs(c) for c in spectrum[: self.size // 2]]


class SpectrogramDisplay:
    """Scrolling history of log-scaled spectrum rows sized to a terminal."""

    def __init__(
        self,
        max_rows: int,
        initial_width: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        width = max(initial_width, 1)
        self.history: List[List[float]] = []
        self.max_rows = max_rows
        self.current_bins = width
        self.current_height = 24
        self._interval_maximums = [0.0] * width
        self._clock = clock
        self._last_row_time = clock()

    def update(
        self, magnitudes: Sequence[float], terminal_width: int, terminal_height: int
    ) -> Optional[List[float]]:
        """Fold a spectrum into the display; return the new row when one is added."""
        if terminal_width != self.current_bins and terminal_width > 0:
            self.resize(terminal_width)

        if terminal_height != self.current_height and terminal_height > 0:
            self.current_height = terminal_height
            self.max_rows = max(terminal_height - 3, 1)
            if len(self.history) > self.max_rows:
                del self.history[: len(self.history) - self.max_rows]

        scaled = self.apply_log_scaling(self.bin_frequencies(magnitudes))
        self._interval_maximums = [
            max(old, new) for old, new in zip(self._interval_maximums, scaled)
        ]

        now = self._clock()
        if now - self._last_row_time >= ROW_UPDATE_INTERVAL or not self.history:
            row = list(self._interval_maximums)
            self.add_row(list(row))
            self._interval_maximums = [0.0] * self.current_bins
            self._last_row_time = self._clock()
            return row
        return None

    def resize(self, new_width: int) -> None:
        """Change the number of columns, discarding the history."""
        self.current_bins = new_width
        self._interval_maximums = [0.0] * new_width
        self.history.clear()

    def bin_frequencies(self, magnitudes: Sequence[float]) -> List[float]:
        """Average magnitudes into one value per column, boosting high frequencies."""
        bins = self.current_bins
        step = max(len(magnitudes), 1) / bins
        divisor = float(max(bins - 1, 1))
        binned = []
        for i in range(bins):
            start = int(i * step)
            end = min(int((i + 1) * step), len(magnitudes))
            chunk = magnitudes[start:end] if start < len(magnitudes) else []
            if chunk:
                weight = 1.0 + HIGH_FREQ_BOOST * i / divisor
                binned.append(sum(chunk) / len(chunk) * weight)
            else:
                binned.append(0.0)
        return binned

    @staticmethod
    def apply_log_scaling(magnitudes: Sequence[float]) -> List[float]:
        """Map magnitudes to 0..1 on a decibel scale between MIN_DB and MAX_DB."""
        scaled = []
        for mag in magnitudes:
            if mag > 0.0:
                db = 20.0 * math.log10(mag)
                normalized = (db - MIN_DB) / (MAX_DB - MIN_DB)
                scaled.append(min(max(normalized, 0.0), 1.0))
            else:
                scaled.append(0.0)
        return scaled

    def add_row(self, row: List[float]) -> None:
        """Append a row, dropping the oldest when the history is full."""
        if self.history and len(self.history) >= self.max_rows:
            del self.history[0]
        self.history.append(row)

    def render(self) -> str:
        """Return the whole screen as a string of ANSI escape sequences."""
        parts = [_CURSOR_HOME, _TITLE, _CLEAR_TO_EOL, "\r\n"]
        separator_width = min(self.current_bins, self.current_height * 3)
        parts += ["-" * separator_width, _CLEAR_TO_EOL, "\r\n"]

        available_rows = max(self.current_height - 3, 0)
        rows_to_render = min(len(self.history), available_rows)
        start = len(self.history) - rows_to_render
        for row in self.history[start:]:
            for value in row[: self.current_bins]:
                parts.append(_color(*value_to_rgb(value)))
                parts.append(_BLOCK)
            parts += [_RESET_COLOR, _CLEAR_TO_EOL, "\r\n"]

        parts += [_CLEAR_TO_EOL + "\r\n"] * (available_rows - rows_to_render)
        return "".join(parts)