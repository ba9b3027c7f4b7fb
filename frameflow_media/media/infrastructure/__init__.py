"""
Media Infrastructure Layer.

Contains implementations of domain interfaces using external dependencies
like FFmpeg, OpenCV, psutil and the file system.
"""

from .caching import InMemoryRangeCache, NoOpRangeCache
from .converters import FFmpegProxyTranscoder
from .metadata_extractors import FFprobeMetadataExtractor, OpenCVMetadataExtractor
from .storage import FileSystemProjectStore, PsutilMemoryMonitor

__all__ = [
    "InMemoryRangeCache",
    "NoOpRangeCache",
    "FFmpegProxyTranscoder",
    "FFprobeMetadataExtractor",
    "OpenCVMetadataExtractor",
    "FileSystemProjectStore",
    "PsutilMemoryMonitor",
]
