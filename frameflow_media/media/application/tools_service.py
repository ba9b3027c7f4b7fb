"""
Media Tools Application Service.

Orchestrates the desktop-side commands: probing, proxy generation,
project saving and memory checks.
"""

import logging

from ...core.logging_config import get_performance_logger
from ..domain.errors import MediaToolError
from ..domain.interfaces import MemoryMonitor, MetadataExtractor, ProjectStore, ProxyTranscoder
from ..domain.models import MemoryLevel, MemoryStatus, VideoMetadata
from ..domain.resources import DEFAULT_SCHEME, decode_resource_uri, is_resource_uri

LOW_MEMORY_THRESHOLD = 1024 * 1024 * 1024  # 1 GiB
CRITICAL_MEMORY_THRESHOLD = 500 * 1024 * 1024  # 500 MiB


def classify_memory(available_bytes: int) -> MemoryLevel:
    if available_bytes < CRITICAL_MEMORY_THRESHOLD:
        return MemoryLevel.CRITICAL
    if available_bytes < LOW_MEMORY_THRESHOLD:
        return MemoryLevel.LOW
    return MemoryLevel.NORMAL


class MediaToolsService:
    """Application service for media tool commands"""

    def __init__(
        self,
        metadata_extractor: MetadataExtractor,
        proxy_transcoder: ProxyTranscoder,
        project_store: ProjectStore,
        memory_monitor: MemoryMonitor,
        scheme: str = DEFAULT_SCHEME
    ):
        self.metadata_extractor = metadata_extractor
        self.proxy_transcoder = proxy_transcoder
        self.project_store = project_store
        self.memory_monitor = memory_monitor
        self.scheme = scheme
        self.logger = logging.getLogger(__name__)
        self.performance_logger = get_performance_logger("media_tools")

    async def get_video_metadata(self, path: str) -> VideoMetadata:
        """Probe a file path or a protocol URI"""
        if is_resource_uri(path, self.scheme):
            path = decode_resource_uri(path, self.scheme)

        try:
            return await self.metadata_extractor.probe(path)
        except MediaToolError as e:
            self.logger.error(f"Metadata probe failed for {path}: {e.message}")
            raise

    async def generate_proxy(self, input_path: str, output_path: str) -> str:
        self.logger.info(f"Generating proxy {output_path} from {input_path}")
        try:
            with self.performance_logger.measure("generate_proxy"):
                result = await self.proxy_transcoder.transcode(input_path, output_path)
        except MediaToolError as e:
            self.logger.error(f"Proxy generation failed for {input_path}: {e.message}")
            raise

        self.logger.info(f"Proxy ready: {result}")
        return result

    async def save_project_file(self, path: str, content: str) -> None:
        try:
            await self.project_store.write(path, content)
        except MediaToolError as e:
            self.logger.error(f"Could not save project to {path}: {e.message}")
            raise

        self.logger.info(f"Project saved to {path}")

    def get_available_memory(self) -> int:
        return self.memory_monitor.available_memory()

    def memory_status(self) -> MemoryStatus:
        available = self.get_available_memory()
        level = classify_memory(available)
        if level is not MemoryLevel.NORMAL:
            self.logger.warning(f"{level.value.capitalize()} system memory: {available / (1024 * 1024):.0f} MB available")
        return MemoryStatus(available_bytes=available, level=level)
