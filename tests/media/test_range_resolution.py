"""Tests for Range header resolution."""

import pytest

from frameflow_media.media.domain.models import ByteRange, PartialRange, UnsatisfiableRange, WholeFile
from frameflow_media.media.domain.ranges import parse_offset, resolve_range

LENGTH = 1000


def _partial(start: int, end: int) -> PartialRange:
    return PartialRange(byte_range=ByteRange(start=start, end=end))


def test_missing_header_serves_whole_file() -> None:
    assert resolve_range(None, LENGTH) == WholeFile()


@pytest.mark.parametrize("header", ["", "items=0-10", "Bytes=0-10", " bytes=0-10", "0-10"])
def test_header_without_bytes_unit_serves_whole_file(header: str) -> None:
    assert resolve_range(header, LENGTH) == WholeFile()


def test_explicit_range() -> None:
    assert resolve_range("bytes=0-99", LENGTH) == _partial(0, 99)


def test_open_ended_range_runs_to_last_byte() -> None:
    assert resolve_range("bytes=100-", LENGTH) == _partial(100, 999)


def test_missing_dash_runs_to_last_byte() -> None:
    assert resolve_range("bytes=250", LENGTH) == _partial(250, 999)


def test_end_past_eof_is_clamped() -> None:
    assert resolve_range("bytes=900-5000", LENGTH) == _partial(900, 999)


def test_start_past_eof_clamps_to_last_byte() -> None:
    assert resolve_range("bytes=1100-", LENGTH) == _partial(999, 999)
    assert resolve_range("bytes=5000-6000", LENGTH) == _partial(999, 999)


def test_start_after_end_is_unsatisfiable() -> None:
    assert resolve_range("bytes=10-5", LENGTH) == UnsatisfiableRange(length=LENGTH)


def test_start_clamped_past_explicit_end_is_unsatisfiable() -> None:
    assert resolve_range("bytes=5000-10", LENGTH) == UnsatisfiableRange(length=LENGTH)


def test_unparseable_bounds_fall_back_to_defaults() -> None:
    assert resolve_range("bytes=abc-def", LENGTH) == _partial(0, 999)
    assert resolve_range("bytes=abc-20", LENGTH) == _partial(0, 20)
    assert resolve_range("bytes=20-xyz", LENGTH) == _partial(20, 999)


def test_suffix_form_is_read_as_start_zero() -> None:
    assert resolve_range("bytes=-5", LENGTH) == _partial(0, 5)


def test_plus_signed_offsets() -> None:
    assert resolve_range("bytes=+5-+9", LENGTH) == _partial(5, 9)


def test_extra_segments_are_ignored() -> None:
    assert resolve_range("bytes=1-2-3", LENGTH) == _partial(1, 2)


def test_single_byte_file() -> None:
    assert resolve_range("bytes=0-", 1) == _partial(0, 0)


def test_empty_file_range_is_unsatisfiable() -> None:
    assert resolve_range("bytes=0-", 0) == UnsatisfiableRange(length=0)
    assert resolve_range(None, 0) == WholeFile()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0", 0),
        ("42", 42),
        ("", None),
        ("-1", None),
        ("+1", 1),
        ("+5", 5),
        ("+", None),
        ("++5", None),
        ("+-5", None),
        (" 1", None),
        ("1_000", None),
        ("١٢", None),
        (str(2 ** 64 - 1), 2 ** 64 - 1),
        (str(2 ** 64), None),
    ],
)
def test_parse_offset(value: str, expected) -> None:
    assert parse_offset(value) == expected


def test_overflowing_start_falls_back_to_zero() -> None:
    assert resolve_range(f"bytes={2 ** 64}-10", LENGTH) == _partial(0, 10)
