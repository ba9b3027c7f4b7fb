"""
Color grading helpers.
"""

from .lut import LUTData, LUTParseError, create_identity_lut, parse_cube

__all__ = ["LUTData", "LUTParseError", "create_identity_lut", "parse_cube"]
