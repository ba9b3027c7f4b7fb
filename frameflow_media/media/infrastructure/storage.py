"""
Project file storage and system memory queries.
"""

import logging

import aiofiles
import psutil

from ..domain.errors import MediaToolError
from ..domain.interfaces import MemoryMonitor, ProjectStore


class FileSystemProjectStore(ProjectStore):
    """Writes project documents straight to disk"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)

    async def write(self, path: str, content: str) -> None:
        try:
            async with aiofiles.open(path, "w", encoding=self.encoding, newline="") as f:
                await f.write(content)
        except OSError as e:
            raise MediaToolError(str(e)) from e

        self.logger.debug(f"Wrote {len(content)} characters to {path}")


class PsutilMemoryMonitor(MemoryMonitor):
    """psutil-backed memory query"""

    def available_memory(self) -> int:
        return int(psutil.virtual_memory().available)
