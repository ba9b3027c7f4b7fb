"""
Media Presentation Layer.

Contains HTTP controllers, request/response models, and API route definitions.
"""

from .controllers import ProtocolController, ToolsController
from .routes import create_command_routes, create_lut_routes, create_protocol_routes

__all__ = [
    "ProtocolController",
    "ToolsController",
    "create_command_routes",
    "create_lut_routes",
    "create_protocol_routes",
]
