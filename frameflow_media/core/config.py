"""
Configuration management for the FrameFlow media host.

This module handles all configuration settings including the resource
protocol, the optional range cache, external media tools and server
parameters.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar("T")


@dataclass
class ProtocolConfig:
    """Resource protocol configuration"""

    scheme: str = "frameflow"
    route_prefix: str = "/frameflow"
    allow_origin: str = "*"


@dataclass
class CacheConfig:
    """Range cache configuration"""

    enabled: bool = False
    max_size_mb: int = 64
    max_age_minutes: int = 10


@dataclass
class ToolsConfig:
    """External media tool configuration"""

    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    proxy_height: int = 540  # Proxy height in pixels, width follows aspect ratio
    proxy_crf: int = 28
    proxy_preset: str = "ultrafast"


@dataclass
class SystemConfig:
    """System-wide configuration"""

    log_level: str = "INFO"
    log_file: str = "frameflow_media.log"
    api_host: str = "127.0.0.1"
    api_port: int = 8765


class Config:
    """Main configuration manager"""

    def __init__(self, config_file: Optional[str] = None, save_defaults: bool = True):
        self.config_file = config_file or "config.json"
        self.save_defaults = save_defaults
        self.logger = logging.getLogger(__name__)

        # Default configurations
        self.protocol = ProtocolConfig()
        self.cache = CacheConfig()
        self.tools = ToolsConfig()
        self.system = SystemConfig()

        self.load_config()

    def load_config(self) -> None:
        """Load configuration from file"""
        config_path = Path(self.config_file)

        if not config_path.exists():
            self.logger.info(f"Config file {config_path} not found, using defaults")
            if self.save_defaults:
                self.save_config()
            return

        try:
            with open(config_path, "r") as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error(f"Error loading config from {config_path}: {e}")
            return

        if "protocol" in config_data:
            self.protocol = self._load_section(ProtocolConfig, "protocol", config_data["protocol"])
        if "cache" in config_data:
            self.cache = self._load_section(CacheConfig, "cache", config_data["cache"])
        if "tools" in config_data:
            self.tools = self._load_section(ToolsConfig, "tools", config_data["tools"])
        if "system" in config_data:
            self.system = self._load_section(SystemConfig, "system", config_data["system"])

        self.logger.info(f"Configuration loaded from {config_path}")

    def _load_section(self, section_type: Type[T], name: str, data: Dict[str, Any]) -> T:
        """Build a section, ignoring keys it doesn't know"""
        known = {f.name for f in fields(section_type)}
        unknown = sorted(set(data) - known)
        if unknown:
            self.logger.warning(f"Ignoring unknown {name} config keys: {', '.join(unknown)}")
        return section_type(**{key: value for key, value in data.items() if key in known})

    def save_config(self) -> None:
        """Save current configuration to file"""
        try:
            with open(self.config_file, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            self.logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            self.logger.error(f"Error saving config to {self.config_file}: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {"protocol": asdict(self.protocol), "cache": asdict(self.cache), "tools": asdict(self.tools), "system": asdict(self.system)}
