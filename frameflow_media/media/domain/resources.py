"""
Resource identifier decoding and MIME classification.
"""

from pathlib import PurePath
from urllib.parse import unquote_to_bytes

DEFAULT_SCHEME = "frameflow"
DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "mp4": "video/mp4",
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
}


def scheme_prefix(scheme: str = DEFAULT_SCHEME) -> str:
    return f"{scheme}://"


def decode_resource_uri(raw_uri: str, scheme: str = DEFAULT_SCHEME) -> str:
    """
    Strip the scheme prefix and percent-decode the remainder.

    Invalid UTF-8 produced by the escapes is replaced with U+FFFD and
    malformed escapes are kept literally, so this never raises.
    """
    remainder = raw_uri.replace(scheme_prefix(scheme), "", 1)
    return unquote_to_bytes(remainder).decode("utf-8", errors="replace")


def is_resource_uri(value: str, scheme: str = DEFAULT_SCHEME) -> bool:
    return value.startswith(scheme_prefix(scheme))


def classify_mime(path: str) -> str:
    """Content type for a path, based on its lower-cased extension"""
    extension = PurePath(path).suffix.lower().lstrip(".")
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)
