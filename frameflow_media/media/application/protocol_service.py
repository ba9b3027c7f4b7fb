"""
Resource Protocol Application Service.

Serves local files for ``frameflow://`` requests with byte-range support.
"""

import logging
from typing import Optional

import aiofiles
import aiofiles.os

from ..domain.interfaces import RangeCache
from ..domain.models import (
    ByteRange,
    FileInfo,
    FullBody,
    IoFailure,
    NotFound,
    PartialBody,
    ProtocolResponse,
    RangeNotSatisfiable,
    ResourceRequest,
    ResponseOutcome,
    UnsatisfiableRange,
    WholeFile,
    render_outcome,
)
from ..domain.ranges import resolve_range
from ..domain.resources import DEFAULT_SCHEME, classify_mime, decode_resource_uri

SHORT_READ_MESSAGE = "failed to fill whole buffer"


class ResourceProtocolService:
    """Application service for the custom resource protocol"""

    def __init__(
        self,
        scheme: str = DEFAULT_SCHEME,
        allow_origin: str = "*",
        range_cache: Optional[RangeCache] = None
    ):
        self.scheme = scheme
        self.allow_origin = allow_origin
        self.range_cache = range_cache
        self.logger = logging.getLogger(__name__)

    async def respond(self, request: ResourceRequest) -> ProtocolResponse:
        """Handle a request and render the outcome"""
        outcome = await self.handle(request)
        return render_outcome(outcome, self.allow_origin)

    async def handle(self, request: ResourceRequest) -> ResponseOutcome:
        """
        Resolve a request into a response outcome.

        Every filesystem error is converted into ``IoFailure`` here; nothing
        is raised to the caller.
        """
        path = decode_resource_uri(request.raw_uri, self.scheme)

        if not await aiofiles.os.path.exists(path):
            self.logger.debug(f"Resource not found: {path}")
            return NotFound()

        try:
            stat_result = await aiofiles.os.stat(path)
        except OSError as e:
            self.logger.warning(f"Could not stat {path}: {e}")
            return IoFailure(str(e))

        file_info = FileInfo(length=stat_result.st_size, mime_type=classify_mime(path))
        version = f"{stat_result.st_size}:{stat_result.st_mtime_ns}"

        try:
            async with aiofiles.open(path, "rb") as f:
                resolution = resolve_range(request.range_header, file_info.length)

                if isinstance(resolution, UnsatisfiableRange):
                    return RangeNotSatisfiable(length=resolution.length)

                if isinstance(resolution, WholeFile):
                    body = await f.read()
                    return FullBody(body=body, file_info=file_info)

                byte_range = resolution.byte_range
                body = await self._cached_range(path, version, byte_range)
                if body is None:
                    body = await self._read_range(f, byte_range)
                    if body is None:
                        return IoFailure(SHORT_READ_MESSAGE)
                    if self.range_cache:
                        await self.range_cache.put(path, version, byte_range, body)

                return PartialBody(body=body, byte_range=byte_range, file_info=file_info)

        except OSError as e:
            self.logger.warning(f"I/O error serving {path}: {e}")
            return IoFailure(str(e))

    async def _read_range(self, f, byte_range: ByteRange) -> Optional[bytes]:
        """Read exactly the bytes of a range, None on a short read"""
        await f.seek(byte_range.start)
        data = await f.read(byte_range.size)
        if len(data) != byte_range.size:
            return None
        return data

    async def _cached_range(self, path: str, version: str, byte_range: ByteRange) -> Optional[bytes]:
        if not self.range_cache:
            return None

        data = await self.range_cache.get(path, version, byte_range)
        if data is not None:
            self.logger.debug(f"Serving cached range {byte_range.start}-{byte_range.end} for {path}")
        return data

    async def invalidate_cache(self, path: str) -> int:
        """Drop cached ranges for a decoded path"""
        if not self.range_cache:
            return 0
        return await self.range_cache.invalidate(path)
