"""
Media Domain Models.

Value objects and response outcomes for the frameflow resource protocol.
These models contain no external dependencies and are created per request.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

FILE_NOT_FOUND_BODY = b"File not found"


@dataclass(frozen=True)
class ResourceRequest:
    """Incoming protocol request"""
    raw_uri: str
    range_header: Optional[str] = None


@dataclass(frozen=True)
class FileInfo:
    """Length and content type of a served file"""
    length: int
    mime_type: str


@dataclass(frozen=True)
class ByteRange:
    """Inclusive byte interval into a file"""
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0:
            raise ValueError("Start byte cannot be negative")
        if self.end < self.start:
            raise ValueError("End byte cannot be less than start byte")

    @property
    def size(self) -> int:
        """Number of bytes covered by the range"""
        return self.end - self.start + 1

    def content_range(self, length: int) -> str:
        return f"bytes {self.start}-{self.end}/{length}"


# Range resolution results

@dataclass(frozen=True)
class WholeFile:
    """Serve the entire file"""


@dataclass(frozen=True)
class PartialRange:
    """Serve a satisfiable sub-range"""
    byte_range: ByteRange


@dataclass(frozen=True)
class UnsatisfiableRange:
    """Requested range cannot be served"""
    length: int


RangeResolution = Union[WholeFile, PartialRange, UnsatisfiableRange]


@dataclass
class ProtocolResponse:
    """Status, headers and body handed to the transport layer"""
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


# Response outcomes

@dataclass(frozen=True)
class NotFound:
    def to_response(self) -> ProtocolResponse:
        return ProtocolResponse(status=404, body=FILE_NOT_FOUND_BODY)


@dataclass(frozen=True)
class IoFailure:
    message: str

    def to_response(self) -> ProtocolResponse:
        return ProtocolResponse(status=500, body=self.message.encode("utf-8"))


@dataclass(frozen=True)
class FullBody:
    body: bytes
    file_info: FileInfo

    def to_response(self, allow_origin: str = "*") -> ProtocolResponse:
        headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Content-Type": self.file_info.mime_type,
            "Content-Length": str(self.file_info.length),
            "Accept-Ranges": "bytes",
        }
        return ProtocolResponse(status=200, headers=headers, body=self.body)


@dataclass(frozen=True)
class PartialBody:
    body: bytes
    byte_range: ByteRange
    file_info: FileInfo

    def to_response(self, allow_origin: str = "*") -> ProtocolResponse:
        headers = {
            "Content-Type": self.file_info.mime_type,
            "Content-Range": self.byte_range.content_range(self.file_info.length),
            "Content-Length": str(self.byte_range.size),
            "Access-Control-Allow-Origin": allow_origin,
            "Accept-Ranges": "bytes",
        }
        return ProtocolResponse(status=206, headers=headers, body=self.body)


@dataclass(frozen=True)
class RangeNotSatisfiable:
    length: int

    def to_response(self) -> ProtocolResponse:
        return ProtocolResponse(status=416, headers={"Content-Range": f"bytes */{self.length}"})


ResponseOutcome = Union[NotFound, IoFailure, FullBody, PartialBody, RangeNotSatisfiable]


def render_outcome(outcome: ResponseOutcome, allow_origin: str = "*") -> ProtocolResponse:
    """Turn an outcome into the status/headers/body triple"""
    if isinstance(outcome, (FullBody, PartialBody)):
        return outcome.to_response(allow_origin)
    return outcome.to_response()


# Collaborator records

@dataclass(frozen=True)
class VideoMetadata:
    """Probe result for a media file"""
    width: int
    height: int
    duration: float


class MemoryLevel(Enum):
    """Available memory classification"""
    NORMAL = "normal"
    LOW = "low"
    CRITICAL = "critical"


@dataclass(frozen=True)
class MemoryStatus:
    available_bytes: int
    level: MemoryLevel
