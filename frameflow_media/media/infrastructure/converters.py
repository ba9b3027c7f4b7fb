"""
Proxy Transcoders.

Generates low-resolution editing proxies using FFmpeg.
"""

import asyncio
import logging
import shutil
from pathlib import Path

from ..domain.errors import MediaToolError
from ..domain.interfaces import ProxyTranscoder


class FFmpegProxyTranscoder(ProxyTranscoder):
    """FFmpeg-based proxy transcoder"""

    def __init__(
        self,
        ffmpeg_path: str = "ffmpeg",
        proxy_height: int = 540,
        crf: int = 28,
        preset: str = "ultrafast"
    ):
        self.ffmpeg_path = ffmpeg_path
        self.proxy_height = proxy_height
        self.crf = crf
        self.preset = preset
        self.logger = logging.getLogger(__name__)

        if shutil.which(ffmpeg_path) is None:
            self.logger.warning("FFmpeg not found - proxy generation will fail until it is installed")

    async def transcode(self, input_path: str, output_path: str) -> str:
        """Scale input to the proxy height, keeping aspect ratio"""
        try:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MediaToolError(f"Cannot create output directory: {e}") from e

        cmd = self._build_ffmpeg_command(input_path, output_path)

        self.logger.info(f"Transcoding {input_path} to {output_path} using FFmpeg")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
            stdout, stderr = await process.communicate()
        except OSError as e:
            raise MediaToolError(f"Failed to execute ffmpeg: {e}") from e

        if process.returncode != 0:
            error_msg = stderr.decode(errors="replace") if stderr else "Unknown FFmpeg error"
            raise MediaToolError(f"FFmpeg error: {error_msg}")

        self.logger.info(f"Successfully transcoded {input_path} to {output_path}")
        return output_path

    def _build_ffmpeg_command(self, input_path: str, output_path: str) -> list:
        """Build FFmpeg command for proxy generation"""
        return [
            self.ffmpeg_path,
            "-i", input_path,
            "-vf", f"scale=-2:{self.proxy_height}",  # -2 keeps width even
            "-c:v", "libx264",
            "-preset", self.preset,
            "-crf", str(self.crf),
            "-y",  # Overwrite output file
            output_path,
        ]
