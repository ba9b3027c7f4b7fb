"""
Media API Routes.

FastAPI route definitions for the resource protocol and media commands.
"""

from urllib.parse import quote

from fastapi import APIRouter, Query, Request

from ..domain.resources import scheme_prefix
from .controllers import ProtocolController, ToolsController
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


def _raw_resource_path(request: Request, route_prefix: str, resource_path: str) -> str:
    """Percent-encoded remainder of the request path after the route prefix"""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        raw = raw_path.decode("latin-1").split("?", 1)[0]
        marker = f"{route_prefix}/"
        index = raw.find(marker)
        if index != -1:
            return raw[index + len(marker):]
    # Fall back to re-encoding the already decoded path parameter
    return quote(resource_path, safe="/")


def create_protocol_routes(
    protocol_controller: ProtocolController,
    scheme: str,
    route_prefix: str = "/frameflow"
) -> APIRouter:
    """Create resource protocol routes"""

    router = APIRouter(prefix=route_prefix, tags=["protocol"])

    @router.get("")
    async def serve_resource_by_uri(
        request: Request,
        uri: str = Query(..., description="Full frameflow:// resource URI")
    ):
        """
        Serve a resource given its full URI.

        - **uri**: e.g. `frameflow://%2Fhome%2Fuser%2Fclip.mp4`
        """
        return await protocol_controller.serve(uri, request.headers.get("range"))

    @router.get("/{resource_path:path}")
    async def serve_resource(resource_path: str, request: Request):
        """
        Serve a local media file with HTTP range request support.

        The path after the prefix is the percent-encoded file path, exactly as
        it follows `frameflow://` in the resource URI.

        Usage in HTML5:
        ```html
        <video controls src="/frameflow/%2Fhome%2Fuser%2Fclip.mp4"></video>
        ```
        """
        raw_uri = scheme_prefix(scheme) + _raw_resource_path(request, route_prefix, resource_path)
        return await protocol_controller.serve(raw_uri, request.headers.get("range"))

    return router


def create_command_routes(tools_controller: ToolsController) -> APIRouter:
    """Create media tool command routes"""

    router = APIRouter(prefix="/commands", tags=["commands"])

    @router.post("/video-metadata", response_model=VideoMetadataResponse)
    async def get_video_metadata(request: VideoMetadataRequest):
        """Probe width, height and duration of a media file"""
        return await tools_controller.get_video_metadata(request)

    @router.post("/save-project", response_model=SuccessResponse)
    async def save_project_file(request: SaveProjectRequest):
        """Write a project document to disk"""
        return await tools_controller.save_project_file(request)

    @router.post("/generate-proxy", response_model=GenerateProxyResponse)
    async def generate_proxy(request: GenerateProxyRequest):
        """
        Transcode a 540p H.264 editing proxy.

        Runs to completion before responding; large sources take a while.
        """
        return await tools_controller.generate_proxy(request)

    @router.get("/available-memory", response_model=MemoryStatusResponse)
    async def get_available_memory():
        return tools_controller.get_memory_status()

    return router


def create_lut_routes(tools_controller: ToolsController) -> APIRouter:
    """Create color LUT routes"""

    router = APIRouter(prefix="/luts", tags=["luts"])

    @router.post("/parse", response_model=LUTInfoResponse)
    async def parse_lut(request: Request):
        """Parse a .cube document sent as the raw request body"""
        body = await request.body()
        return tools_controller.parse_lut(body.decode("utf-8", errors="replace"))

    return router
