"""
Media Metadata Extractors.

Implementations for probing width, height and duration using ffprobe,
with an OpenCV fallback for hosts without FFmpeg tools.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import cv2

from ..domain.errors import MediaToolError
from ..domain.interfaces import MetadataExtractor
from ..domain.models import VideoMetadata


class FFprobeMetadataExtractor(MetadataExtractor):
    """ffprobe-based metadata extractor"""

    def __init__(self, ffprobe_path: str = "ffprobe"):
        self.ffprobe_path = ffprobe_path
        self.logger = logging.getLogger(__name__)

    async def probe(self, path: str) -> VideoMetadata:
        """Extract metadata from a media file using ffprobe"""
        cmd = self._build_ffprobe_command(path)

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
            stdout, stderr = await process.communicate()
        except OSError as e:
            raise MediaToolError(f"FFprobe failed: {e}") from e

        if process.returncode != 0:
            detail = stderr.decode(errors="replace").strip() if stderr else ""
            raise MediaToolError(f"FFprobe failed: {detail or f'exit status {process.returncode}'}")

        try:
            info = json.loads(stdout.decode(errors="replace"))
        except ValueError as e:
            raise MediaToolError(f"FFprobe failed: {e}") from e

        return self._parse_probe_output(info)

    def _parse_probe_output(self, info: dict) -> VideoMetadata:
        """Build metadata from ffprobe's JSON document"""
        streams = info.get("streams") or []
        video_stream = next((s for s in streams if s.get("codec_type") == "video"), None)

        width = 0
        height = 0
        if video_stream:
            width = int(video_stream.get("width") or 0)
            height = int(video_stream.get("height") or 0)

        # Container duration is more reliable than per-stream duration
        duration_str = (info.get("format") or {}).get("duration") or "0"
        try:
            duration = float(duration_str)
        except (TypeError, ValueError):
            duration = 0.0

        return VideoMetadata(width=width, height=height, duration=duration)

    def _build_ffprobe_command(self, path: str) -> list:
        return [
            self.ffprobe_path,
            "-v", "quiet",
            "-print_format", "json",
            "-show_format",
            "-show_streams",
            path,
        ]


class OpenCVMetadataExtractor(MetadataExtractor):
    """OpenCV-based metadata extractor"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    async def probe(self, path: str) -> VideoMetadata:
        """Extract metadata from a video file using OpenCV"""
        # Run OpenCV operations in thread pool to avoid blocking
        metadata = await asyncio.get_event_loop().run_in_executor(
            None, self._probe_sync, Path(path)
        )
        if metadata is None:
            raise MediaToolError(f"OpenCV could not open {path}")
        return metadata

    def _probe_sync(self, file_path: Path) -> Optional[VideoMetadata]:
        """Synchronous metadata extraction"""
        cap = None
        try:
            cap = cv2.VideoCapture(str(file_path))

            if not cap.isOpened():
                self.logger.warning(f"Could not open video file: {file_path}")
                return None

            width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
            height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
            fps = cap.get(cv2.CAP_PROP_FPS)
            frame_count = int(cap.get(cv2.CAP_PROP_FRAME_COUNT))

            duration = frame_count / fps if fps > 0 else 0.0

            return VideoMetadata(width=width, height=height, duration=duration)

        finally:
            if cap is not None:
                cap.release()
