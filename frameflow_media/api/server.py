"""
FastAPI application for the FrameFlow media host.

Mounts the media routes behind permissive CORS so the embedded playback
surface can load resources from any origin.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.config import Config
from ..media.integration import MediaModule

logger = logging.getLogger(__name__)


def create_app(config: Config, media_module: Optional[MediaModule] = None) -> FastAPI:
    """Build the FastAPI app for a configuration"""
    media_module = media_module or MediaModule(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Media host serving {config.protocol.scheme}:// at {config.protocol.route_prefix}")
        yield
        await media_module.cleanup()

    app = FastAPI(
        title="FrameFlow Media Host API",
        description="Range-aware local media serving for the FrameFlow editor",
        version=__version__,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.protocol.allow_origin],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Range", "Content-Length", "Accept-Ranges"]
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "timestamp": datetime.now().isoformat()}

    @app.get("/system/status")
    async def get_system_status():
        return {"version": __version__, "media": media_module.get_module_status()}

    for router in media_module.get_api_routes():
        app.include_router(router)

    app.state.media_module = media_module
    return app
