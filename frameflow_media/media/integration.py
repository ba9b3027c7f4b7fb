"""
Media Module Integration.

Handles dependency injection and service composition for the resource
protocol and the media tool commands.
"""

import logging
import shutil
from typing import List

from fastapi import APIRouter

from ..core.config import Config

# Domain interfaces
from .domain.interfaces import MemoryMonitor, MetadataExtractor, ProjectStore, ProxyTranscoder, RangeCache

# Infrastructure implementations
from .infrastructure.caching import InMemoryRangeCache, NoOpRangeCache
from .infrastructure.converters import FFmpegProxyTranscoder
from .infrastructure.metadata_extractors import FFprobeMetadataExtractor, OpenCVMetadataExtractor
from .infrastructure.storage import FileSystemProjectStore, PsutilMemoryMonitor

# Application services
from .application.protocol_service import ResourceProtocolService
from .application.tools_service import MediaToolsService

# Presentation layer
from .presentation.controllers import ProtocolController, ToolsController
from .presentation.routes import create_command_routes, create_lut_routes, create_protocol_routes


class MediaModule:
    """
    Composition root for the media host.

    Creates and wires the infrastructure, application and presentation
    objects from a ``Config``.
    """

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(__name__)

        self._initialize_services()

        self.logger.info("Media module initialized successfully")

    def _initialize_services(self):
        # Infrastructure layer
        self.range_cache = self._create_range_cache()
        self.metadata_extractor = self._create_metadata_extractor()
        self.proxy_transcoder = self._create_proxy_transcoder()
        self.project_store: ProjectStore = FileSystemProjectStore()
        self.memory_monitor: MemoryMonitor = PsutilMemoryMonitor()

        # Application layer
        self.protocol_service = ResourceProtocolService(
            scheme=self.config.protocol.scheme,
            allow_origin=self.config.protocol.allow_origin,
            range_cache=self.range_cache if self.config.cache.enabled else None
        )

        self.tools_service = MediaToolsService(
            metadata_extractor=self.metadata_extractor,
            proxy_transcoder=self.proxy_transcoder,
            project_store=self.project_store,
            memory_monitor=self.memory_monitor,
            scheme=self.config.protocol.scheme
        )

        # Presentation layer
        self.protocol_controller = ProtocolController(self.protocol_service)
        self.tools_controller = ToolsController(self.tools_service)

    def _create_range_cache(self) -> RangeCache:
        if self.config.cache.enabled:
            return InMemoryRangeCache(
                max_size_mb=self.config.cache.max_size_mb,
                max_age_minutes=self.config.cache.max_age_minutes
            )
        return NoOpRangeCache()

    def _create_metadata_extractor(self) -> MetadataExtractor:
        """Prefer ffprobe; fall back to OpenCV when it isn't installed"""
        if shutil.which(self.config.tools.ffprobe_path):
            return FFprobeMetadataExtractor(ffprobe_path=self.config.tools.ffprobe_path)

        self.logger.warning("ffprobe not found - using OpenCV for metadata probing")
        return OpenCVMetadataExtractor()

    def _create_proxy_transcoder(self) -> ProxyTranscoder:
        return FFmpegProxyTranscoder(
            ffmpeg_path=self.config.tools.ffmpeg_path,
            proxy_height=self.config.tools.proxy_height,
            crf=self.config.tools.proxy_crf,
            preset=self.config.tools.proxy_preset
        )

    def get_api_routes(self) -> List[APIRouter]:
        return [
            create_protocol_routes(
                protocol_controller=self.protocol_controller,
                scheme=self.config.protocol.scheme,
                route_prefix=self.config.protocol.route_prefix
            ),
            create_command_routes(self.tools_controller),
            create_lut_routes(self.tools_controller),
        ]

    async def cleanup(self):
        """Release cached ranges"""
        removed = await self.range_cache.cleanup(max_size_mb=0)
        self.logger.info(f"Media module cleanup completed ({removed} cached ranges dropped)")

    def get_module_status(self) -> dict:
        return {
            "metadata_extractor": type(self.metadata_extractor).__name__,
            "proxy_transcoder": type(self.proxy_transcoder).__name__,
            "range_cache": type(self.range_cache).__name__,
            "caching_enabled": self.config.cache.enabled,
            "scheme": self.config.protocol.scheme,
        }
