"""
Range header resolution.

Turns an optional ``Range`` header and a known file length into a
``RangeResolution``. Parsing is lenient: malformed input degrades to a default
instead of failing the request.
"""

from typing import Optional

from .models import ByteRange, PartialRange, RangeResolution, UnsatisfiableRange, WholeFile

RANGE_UNIT_PREFIX = "bytes="
MAX_OFFSET = 2 ** 64 - 1


def parse_offset(value: str) -> Optional[int]:
    """Parse an unsigned 64-bit offset, None when the text is not one"""
    if value.startswith("+"):
        value = value[1:]
    if not value or not value.isascii() or not value.isdigit():
        return None
    offset = int(value)
    if offset > MAX_OFFSET:
        return None
    return offset


def resolve_range(range_header: Optional[str], length: int) -> RangeResolution:
    """
    Resolve ``bytes=<start>-[<end>]`` against a file of ``length`` bytes.

    Both bounds are clamped to the last byte independently, so a start past
    EOF resolves to the final byte instead of a 416.
    """
    if range_header is None or not range_header.startswith(RANGE_UNIT_PREFIX):
        return WholeFile()

    segments = range_header[len(RANGE_UNIT_PREFIX):].split("-")
    # str.split never returns an empty list; kept for the zero-segment case
    if not segments:
        return WholeFile()

    if length <= 0:
        return UnsatisfiableRange(length=0)

    last_byte = length - 1

    start = parse_offset(segments[0])
    if start is None:
        start = 0

    end = None
    if len(segments) > 1 and segments[1]:
        end = parse_offset(segments[1])
    if end is None:
        end = last_byte

    start = min(start, last_byte)
    end = min(end, last_byte)

    if start > end:
        return UnsatisfiableRange(length=length)

    return PartialRange(byte_range=ByteRange(start=start, end=end))
