"""
Media Domain Interfaces.

Abstract interfaces for the collaborators around the resource protocol.
These interfaces allow dependency inversion - domain logic doesn't depend on infrastructure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .models import ByteRange, VideoMetadata


class MetadataExtractor(ABC):
    """Abstract media metadata probe"""

    @abstractmethod
    async def probe(self, path: str) -> VideoMetadata:
        """Return width, height and duration; raise MediaToolError on failure"""
        pass


class ProxyTranscoder(ABC):
    """Abstract proxy file generator"""

    @abstractmethod
    async def transcode(self, input_path: str, output_path: str) -> str:
        """Write a proxy of input_path to output_path and return output_path"""
        pass


class ProjectStore(ABC):
    """Abstract project file persistence"""

    @abstractmethod
    async def write(self, path: str, content: str) -> None:
        """Write project content to path"""
        pass


class MemoryMonitor(ABC):
    """Abstract system memory query"""

    @abstractmethod
    def available_memory(self) -> int:
        """Available system memory in bytes"""
        pass


class RangeCache(ABC):
    """Abstract cache for partial bodies"""

    @abstractmethod
    async def get(self, path: str, version: str, byte_range: ByteRange) -> Optional[bytes]:
        """Get cached bytes for a range of a specific file version"""
        pass

    @abstractmethod
    async def put(self, path: str, version: str, byte_range: ByteRange, data: bytes) -> None:
        """Cache bytes for a range of a specific file version"""
        pass

    @abstractmethod
    async def invalidate(self, path: str) -> int:
        """Drop every entry for a path, returning how many were removed"""
        pass

    @abstractmethod
    async def cleanup(self, max_size_mb: Optional[int] = None) -> int:
        """Drop expired entries and shrink under a size limit"""
        pass
