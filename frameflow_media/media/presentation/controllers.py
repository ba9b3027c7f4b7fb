"""
Media HTTP Controllers.

Handle HTTP requests and responses for the resource protocol and the media
tool commands.
"""

import logging
from typing import Optional

from fastapi import HTTPException, Response

from ...grading.lut import LUTParseError, parse_cube
from ..application.protocol_service import ResourceProtocolService
from ..application.tools_service import MediaToolsService
from ..domain.errors import MediaToolError
from ..domain.models import ResourceRequest
from .schemas import (
    GenerateProxyRequest,
    GenerateProxyResponse,
    LUTInfoResponse,
    MemoryStatusResponse,
    SaveProjectRequest,
    SuccessResponse,
    VideoMetadataRequest,
    VideoMetadataResponse,
)


class ProtocolController:
    """Controller for frameflow:// resource requests"""

    def __init__(self, protocol_service: ResourceProtocolService):
        self.protocol_service = protocol_service
        self.logger = logging.getLogger(__name__)

    async def serve(self, raw_uri: str, range_header: Optional[str]) -> Response:
        """Serve a resource, passing status, headers and body through untouched"""
        request = ResourceRequest(raw_uri=raw_uri, range_header=range_header)
        protocol_response = await self.protocol_service.respond(request)

        self.logger.debug(f"{protocol_response.status} {raw_uri} range={range_header}")
        return Response(
            content=protocol_response.body,
            status_code=protocol_response.status,
            headers=protocol_response.headers
        )


class ToolsController:
    """Controller for media tool commands"""

    def __init__(self, tools_service: MediaToolsService):
        self.tools_service = tools_service
        self.logger = logging.getLogger(__name__)

    async def get_video_metadata(self, request: VideoMetadataRequest) -> VideoMetadataResponse:
        try:
            metadata = await self.tools_service.get_video_metadata(request.path)
        except MediaToolError as e:
            raise HTTPException(status_code=500, detail=e.message)

        return VideoMetadataResponse(width=metadata.width, height=metadata.height, duration=metadata.duration)

    async def save_project_file(self, request: SaveProjectRequest) -> SuccessResponse:
        try:
            await self.tools_service.save_project_file(request.path, request.content)
        except MediaToolError as e:
            raise HTTPException(status_code=500, detail=e.message)

        return SuccessResponse()

    async def generate_proxy(self, request: GenerateProxyRequest) -> GenerateProxyResponse:
        try:
            output_path = await self.tools_service.generate_proxy(request.input_path, request.output_path)
        except MediaToolError as e:
            raise HTTPException(status_code=500, detail=e.message)

        return GenerateProxyResponse(output_path=output_path)

    def get_memory_status(self) -> MemoryStatusResponse:
        status = self.tools_service.memory_status()
        return MemoryStatusResponse(available_bytes=status.available_bytes, level=status.level.value)

    def parse_lut(self, content: str) -> LUTInfoResponse:
        try:
            lut = parse_cube(content)
        except LUTParseError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return LUTInfoResponse(size=lut.size, point_count=lut.point_count)
