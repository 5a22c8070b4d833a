"""Sample packing and channel handling for sending audio between peers.

Audio travels over the network as mono 32-bit floats in little-endian
order, one value per frame.
"""

from __future__ import annotations

import struct
from collections import deque
from typing import Deque, Iterable, List, MutableSequence, Sequence

__all__ = [
    "SAMPLE_SIZE",
    "RECEIVE_BUFFER_SIZE",
    "pack_samples",
    "unpack_samples",
    "first_channel",
    "fill_from_buffer",
]

SAMPLE_SIZE = 4
"""Bytes per sample on the wire."""

RECEIVE_BUFFER_SIZE = 8192
"""Largest datagram read from the socket."""


def pack_samples(samples: Iterable[float]) -> bytes:
    """Encode samples as little-endian 32-bit floats."""
    values = [float(s) for s in samples]
    return struct.pack(f"<{len(values)}f", *values)


def unpack_samples(data: bytes) -> List[float]:
    """Decode little-endian 32-bit floats.

    Raises ValueError when the length is not a whole number of samples.
    """
    if len(data) % SAMPLE_SIZE:
        raise ValueError(
            "Received UDP packet with incorrect size (not multiple of sample size)."
        )
    return list(struct.unpack(f"<{len(data) // SAMPLE_SIZE}f", data))


def _check_channels(channels: int) -> None:
    if channels <= 0:
        raise ValueError("channel count must be positive")


def first_channel(data: Sequence[float], channels: int) -> List[float]:
    """Return the first channel of interleaved ``data``; a partial last frame is dropped."""
    _check_channels(channels)
    frames = len(data) // channels
    return [float(s) for s in data[: frames * channels : channels]]


def fill_from_buffer(
    output: MutableSequence[float], channels: int, buffer: Deque[float]
) -> int:
    """Fill whole frames of ``output`` with samples taken from the front of ``buffer``.

    Each sample is copied to every channel of its frame; silence is used once
    the buffer runs dry. A trailing partial frame is left untouched. Returns
    the number of frames filled from the buffer.
    """
    _check_channels(channels)
    if not isinstance(buffer, deque):
        raise TypeError("buffer must be a collections.deque")
    frames = len(output) // channels
    taken = 0
    for frame in range(frames):
        if buffer:
            value = float(buffer.popleft())
            taken += 1
        else:
            value = 0.0
        start = frame * channels
        output[start : start + channels] = [value] * channels
    return taken