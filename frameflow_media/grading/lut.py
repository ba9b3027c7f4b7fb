"""
Color lookup table parsing.

Reads Adobe ``.cube`` 3D LUT text into a flat RGBA float32 array laid out
the way GPU 3D textures expect it (red varies fastest).
"""

from dataclasses import dataclass

import numpy as np

MAX_LUT_SIZE = 256


class LUTParseError(ValueError):
    """Raised when a .cube document cannot be parsed"""


@dataclass
class LUTData:
    """Parsed 3D LUT"""
    size: int
    data: np.ndarray

    @property
    def point_count(self) -> int:
        return self.size ** 3


def _parse_size(line: str) -> int:
    parts = line.split()
    if len(parts) < 2:
        raise LUTParseError("Invalid LUT_3D_SIZE")
    try:
        size = int(parts[1])
    except ValueError:
        raise LUTParseError("Invalid size")
    if size < 0 or size > MAX_LUT_SIZE:
        raise LUTParseError(f"LUT_3D_SIZE out of range: {size}")
    return size


def parse_cube(content: str) -> LUTData:
    """
    Parse a ``.cube`` document.

    Comments, blank lines, ``TITLE`` and ``DOMAIN_*`` headers are skipped.
    Data lines before ``LUT_3D_SIZE``, lines that don't start with three
    numbers, and points beyond the cube's capacity are ignored.
    """
    size = 0
    data = None
    data_index = 0

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or line.startswith("TITLE") or line.startswith("DOMAIN_"):
            continue

        if line.startswith("LUT_3D_SIZE"):
            size = _parse_size(line)
            data = np.zeros(size ** 3 * 4, dtype=np.float32)
            data_index = 0
            continue

        if data is None:
            continue

        parts = line.split()
        if len(parts) < 3:
            continue
        try:
            r, g, b = float(parts[0]), float(parts[1]), float(parts[2])
        except ValueError:
            continue

        if data_index < size ** 3:
            data[data_index * 4:data_index * 4 + 4] = (r, g, b, 1.0)
            data_index += 1

    if data is None or size == 0:
        raise LUTParseError("Invalid .cube file: size or data missing")

    return LUTData(size=size, data=data)


def create_identity_lut(size: int = 33) -> LUTData:
    """Identity LUT: every color maps to itself"""
    if size < 2:
        raise ValueError("Identity LUT size must be at least 2")

    steps = np.arange(size, dtype=np.float32) / (size - 1)
    b, g, r = np.meshgrid(steps, steps, steps, indexing="ij")
    data = np.stack([r, g, b, np.ones_like(r)], axis=-1).reshape(-1)
    return LUTData(size=size, data=data)
