"""
HTTP API for the FrameFlow media host.
"""

from .server import create_app

__all__ = ["create_app"]
