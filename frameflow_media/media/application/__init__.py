"""
Media Application Layer.

Contains use cases and application services that orchestrate domain logic
and coordinate between domain and infrastructure layers.
"""

from .protocol_service import ResourceProtocolService
from .tools_service import MediaToolsService

__all__ = [
    "ResourceProtocolService",
    "MediaToolsService",
]
