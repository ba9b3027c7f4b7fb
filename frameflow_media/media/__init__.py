"""
Media Module for the FrameFlow media host.

Serves local media over the frameflow:// resource protocol and exposes the
probe, proxy, project and memory commands.
"""

from .application.protocol_service import ResourceProtocolService
from .application.tools_service import MediaToolsService
from .domain.models import ByteRange, FileInfo, ProtocolResponse, ResourceRequest, VideoMetadata
from .integration import MediaModule

__all__ = [
    "ByteRange",
    "FileInfo",
    "ProtocolResponse",
    "ResourceRequest",
    "VideoMetadata",
    "ResourceProtocolService",
    "MediaToolsService",
    "MediaModule",
]
