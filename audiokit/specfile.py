"""Binary spectrogram files: a recorder that appends rows and an indexed reader.

Each row is stored as:

* ``u64`` microseconds elapsed since recording started (little-endian)
* ``u16`` number of magnitude bins in the row (little-endian)
* ``bins * f32`` magnitude values (little-endian)
"""

from __future__ import annotations

import os
import struct
import time
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterable, List, Optional, Union

__all__ = ["SpectrogramRecorder", "SpectrogramReader", "MAX_BINS"]

_HEADER = struct.Struct("<QH")
_TIMESTAMP_SIZE = 8
_BIN_SIZE = 4

MAX_BINS = 0xFFFF
"""Largest number of bins a single row can hold."""

PathLike = Union[str, "os.PathLike[str]"]


def _micros_between(start: float, end: float) -> int:
    nanos = round((end - start) * 1_000_000_000)
    return max(nanos, 0) // 1000


class SpectrogramRecorder:
    """Writes spectrogram rows with timestamps relative to its creation time."""

    def __init__(
        self, path: PathLike, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self._clock = clock
        self._file: BinaryIO = open(path, "wb")
        self.start_time = clock()

    def write_row(self, timestamp: Optional[float], bins: Iterable[float]) -> None:
        """Append one row stamped at ``timestamp`` (a clock reading; None means now)."""
        if self._file.closed:
            raise ValueError("recorder is closed")
        if timestamp is None:
            timestamp = self._clock()
        values = [float(v) for v in bins]
        if len(values) > MAX_BINS:
            raise ValueError(f"a row holds at most {MAX_BINS} bins, got {len(values)}")
        micros = _micros_between(self.start_time, timestamp)
        record = _HEADER.pack(micros, len(values)) + struct.pack(
            f"<{len(values)}f", *values
        )
        self._file.write(record)
        self._file.flush()

    def close(self) -> None:
        """Flush and close the file."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def __enter__(self) -> "SpectrogramRecorder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass(frozen=True)
class _RowEntry:
    offset: int
    timestamp_micros: int
    bin_count: int


class SpectrogramReader:
    """Indexes a spectrogram file and loads rows from disk on demand."""

    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)
        self._file: BinaryIO = open(path, "rb")
        self._index: List[_RowEntry] = []
        last_micros = 0
        try:
            file_size = os.fstat(self._file.fileno()).st_size
            offset = 0
            while True:
                self._file.seek(offset)
                header = self._file.read(_HEADER.size)
                if len(header) < _HEADER.size:
                    break
                micros, count = _HEADER.unpack(header)
                self._index.append(_RowEntry(offset, micros, count))
                offset += _HEADER.size + count * _BIN_SIZE
                if offset > file_size:
                    # The row's bins are cut short; it stays indexed but
                    # does not count towards the duration.
                    break
                last_micros = micros
        except BaseException:
            self._file.close()
            raise
        self.total_duration = last_micros / 1_000_000
        """Timestamp of the last complete row, in seconds."""

    def row_count(self) -> int:
        """Return the number of indexed rows."""
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def _entry(self, index: int) -> Optional[_RowEntry]:
        if 0 <= index < len(self._index):
            return self._index[index]
        return None

    def get_timestamp(self, index: int) -> Optional[float]:
        """Return the row's timestamp in seconds, or None when out of range."""
        entry = self._entry(index)
        return None if entry is None else entry.timestamp_micros / 1_000_000

    def get_row(self, index: int) -> Optional[List[float]]:
        """Read the row's bins from disk, or return None when out of range.

        Raises EOFError when the row's data is truncated.
        """
        entry = self._entry(index)
        if entry is None:
            return None
        if self._file.closed:
            raise ValueError("reader is closed")
        self._file.seek(entry.offset + _HEADER.size)
        size = entry.bin_count * _BIN_SIZE
        data = self._file.read(size)
        if len(data) < size:
            raise EOFError(f"row {index} is truncated")
        return list(struct.unpack(f"<{entry.bin_count}f", data))

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> "SpectrogramReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()