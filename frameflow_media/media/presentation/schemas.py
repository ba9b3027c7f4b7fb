"""
Media API Request/Response Schemas.

Pydantic models for API serialization and validation.
"""

from pydantic import BaseModel, Field


class VideoMetadataRequest(BaseModel):
    """Metadata probe request"""
    path: str = Field(..., description="File path or frameflow:// URI")

    model_config = {
        "json_schema_extra": {
            "example": {"path": "frameflow://%2Fhome%2Fuser%2Fclip.mp4"}
        }
    }


class VideoMetadataResponse(BaseModel):
    """Video metadata response model"""
    width: int = Field(..., description="Video width in pixels")
    height: int = Field(..., description="Video height in pixels")
    duration: float = Field(..., description="Duration in seconds")

    model_config = {
        "json_schema_extra": {
            "example": {"width": 1920, "height": 1080, "duration": 120.5}
        }
    }


class SaveProjectRequest(BaseModel):
    """Project save request"""
    path: str = Field(..., description="Destination path")
    content: str = Field(..., description="Serialized project document")


class SuccessResponse(BaseModel):
    success: bool = True


class GenerateProxyRequest(BaseModel):
    """Proxy generation request"""
    input_path: str = Field(..., description="Source media path")
    output_path: str = Field(..., description="Proxy destination path")

    model_config = {
        "json_schema_extra": {
            "example": {
                "input_path": "/media/clip.mp4",
                "output_path": "/media/.proxies/clip_540p.mp4"
            }
        }
    }


class GenerateProxyResponse(BaseModel):
    output_path: str = Field(..., description="Path of the written proxy")


class MemoryStatusResponse(BaseModel):
    """Available memory response"""
    available_bytes: int = Field(..., description="Available system memory in bytes")
    level: str = Field(..., description="normal, low or critical")


class LUTInfoResponse(BaseModel):
    """Parsed LUT summary"""
    size: int = Field(..., description="Cube edge length")
    point_count: int = Field(..., description="Number of RGB points (size cubed)")
