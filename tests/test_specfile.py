import pytest

from audiokit.specfile import MAX_BINS, SpectrogramReader, SpectrogramRecorder


def _fake_clock(start=0.0):
    now = [start]

    def clock():
        return now[0]

    return clock, now


def test_wire_format_of_single_row(tmp_path):
    path = tmp_path / "one.bin"
    clock, _ = _fake_clock()
    with SpectrogramRecorder(path, clock=clock) as rec:
        rec.write_row(0.0, [1.0])
    assert path.read_bytes() == b"\x00" * 8 + b"\x01\x00" + b"\x00\x00\x80\x3f"


def test_round_trip_rows_and_timestamps(tmp_path):
    path = tmp_path / "rows.bin"
    clock, _ = _fake_clock(10.0)
    rows = [[0.5, 0.25, 1.0], [], [0.125] * 7]
    stamps = [10.0, 10.5, 12.25]
    with SpectrogramRecorder(path, clock=clock) as rec:
        for stamp, row in zip(stamps, rows):
            rec.write_row(stamp, row)

    with SpectrogramReader(path) as reader:
        assert reader.row_count() == 3
        assert len(reader) == 3
        for i, row in enumerate(rows):
            assert reader.get_row(i) == row
        assert reader.get_timestamp(0) == 0.0
        assert reader.get_timestamp(1) == 0.5
        assert reader.get_timestamp(2) == 2.25
        assert reader.total_duration == 2.25


def test_rows_can_be_read_in_any_order(tmp_path):
    path = tmp_path / "order.bin"
    clock, _ = _fake_clock()
    with SpectrogramRecorder(path, clock=clock) as rec:
        for i in range(5):
            rec.write_row(float(i), [float(i)] * (i + 1))
    with SpectrogramReader(path) as reader:
        for i in (4, 0, 2, 3, 1, 4):
            assert reader.get_row(i) == [float(i)] * (i + 1)


def test_none_timestamp_uses_clock(tmp_path):
    path = tmp_path / "now.bin"
    clock, now = _fake_clock(5.0)
    with SpectrogramRecorder(path, clock=clock) as rec:
        now[0] = 6.5
        rec.write_row(None, [0.5])
    with SpectrogramReader(path) as reader:
        assert reader.get_timestamp(0) == 1.5


def test_timestamp_before_start_is_clamped_to_zero(tmp_path):
    path = tmp_path / "early.bin"
    clock, _ = _fake_clock(3.0)
    with SpectrogramRecorder(path, clock=clock) as rec:
        rec.write_row(1.0, [0.5])
    with SpectrogramReader(path) as reader:
        assert reader.get_timestamp(0) == 0.0


def test_out_of_range_returns_none(tmp_path):
    path = tmp_path / "range.bin"
    clock, _ = _fake_clock()
    with SpectrogramRecorder(path, clock=clock) as rec:
        rec.write_row(0.0, [0.5])
    with SpectrogramReader(path) as reader:
        assert reader.get_row(1) is None
        assert reader.get_row(-1) is None
        assert reader.get_timestamp(1) is None


def test_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with SpectrogramReader(path) as reader:
        assert reader.row_count() == 0
        assert reader.total_duration == 0.0
        assert reader.get_row(0) is None


def test_truncated_header_is_ignored(tmp_path):
    path = tmp_path / "cut.bin"
    clock, _ = _fake_clock()
    with SpectrogramRecorder(path, clock=clock) as rec:
        rec.write_row(0.0, [0.5])
        rec.write_row(1.0, [0.25])
    data = path.read_bytes()
    full_row = len(data) // 2
    path.write_bytes(data[: full_row + 9])
    with SpectrogramReader(path) as reader:
        assert reader.row_count() == 1
        assert reader.get_row(0) == [0.5]


def test_truncated_bins_are_indexed_but_unreadable(tmp_path):
    path = tmp_path / "short.bin"
    clock, _ = _fake_clock()
    with SpectrogramRecorder(path, clock=clock) as rec:
        rec.write_row(0.5, [0.5])
        rec.write_row(2.0, [0.25, 0.125])
    path.write_bytes(path.read_bytes()[:-2])
    with SpectrogramReader(path) as reader:
        assert reader.row_count() == 2
        assert reader.total_duration == 0.5
        assert reader.get_timestamp(1) == 2.0
        with pytest.raises(EOFError):
            reader.get_row(1)
        assert reader.get_row(0) == [0.5]


def test_too_many_bins_rejected(tmp_path):
    path = tmp_path / "big.bin"
    clock, _ = _fake_clock()
    with SpectrogramRecorder(path, clock=clock) as rec:
        with pytest.raises(ValueError):
            rec.write_row(0.0, [0.0] * (MAX_BINS + 1))
    assert path.read_bytes() == b""


def test_write_after_close_rejected(tmp_path):
    path = tmp_path / "closed.bin"
    clock, _ = _fake_clock()
    rec = SpectrogramRecorder(path, clock=clock)
    rec.close()
    with pytest.raises(ValueError):
        rec.write_row(0.0, [1.0])


def test_recorder_overwrites_existing_file(tmp_path):
    path = tmp_path / "over.bin"
    path.write_bytes(b"junk data that is long enough to look like rows")
    clock, _ = _fake_clock()
    with SpectrogramRecorder(path, clock=clock) as rec:
        rec.write_row(0.0, [0.25, 0.5])
    with SpectrogramReader(path) as reader:
        assert reader.row_count() == 1
        assert reader.get_row(0) == [0.25, 0.5]


def test_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpectrogramReader(tmp_path / "absent.bin")


def test_reader_keeps_path(tmp_path):
    path = tmp_path / "named.bin"
    path.write_bytes(b"")
    with SpectrogramReader(path) as reader:
        assert reader.path == str(path)