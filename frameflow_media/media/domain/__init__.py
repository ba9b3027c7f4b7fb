"""
Media Domain Layer.

Contains the resource protocol's value objects, outcomes and pure functions.
No external dependencies - only Python standard library and domain concepts.
"""

from .errors import MediaToolError
from .interfaces import MemoryMonitor, MetadataExtractor, ProjectStore, ProxyTranscoder, RangeCache
from .models import (
    ByteRange,
    FileInfo,
    FullBody,
    IoFailure,
    MemoryLevel,
    MemoryStatus,
    NotFound,
    PartialBody,
    PartialRange,
    ProtocolResponse,
    RangeNotSatisfiable,
    ResourceRequest,
    UnsatisfiableRange,
    VideoMetadata,
    WholeFile,
    render_outcome,
)
from .ranges import resolve_range
from .resources import classify_mime, decode_resource_uri

__all__ = [
    "ByteRange",
    "FileInfo",
    "FullBody",
    "IoFailure",
    "MediaToolError",
    "MemoryLevel",
    "MemoryMonitor",
    "MemoryStatus",
    "MetadataExtractor",
    "NotFound",
    "PartialBody",
    "PartialRange",
    "ProjectStore",
    "ProtocolResponse",
    "ProxyTranscoder",
    "RangeCache",
    "RangeNotSatisfiable",
    "ResourceRequest",
    "UnsatisfiableRange",
    "VideoMetadata",
    "WholeFile",
    "classify_mime",
    "decode_resource_uri",
    "render_outcome",
    "resolve_range",
]
