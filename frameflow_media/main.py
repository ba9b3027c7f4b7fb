"""
Main Application Coordinator for the FrameFlow media host.

Loads configuration, sets up logging, and runs the HTTP server.
"""

import argparse
import logging
import sys
from typing import Optional

import uvicorn

from .api.server import create_app
from .core.config import Config
from .core.logging_config import get_error_tracker, get_performance_logger, setup_logging
from .media.integration import MediaModule


class FrameFlowMediaHost:
    """Main application coordinator"""

    def __init__(self, config_file: Optional[str] = None):
        # Load configuration first (basic logging will be used initially)
        self.config = Config(config_file)

        self.logger_setup = setup_logging(log_level=self.config.system.log_level, log_file=self.config.system.log_file)
        self.logger = logging.getLogger(__name__)

        self.error_tracker = get_error_tracker("media_host")
        self.performance_logger = get_performance_logger("media_host")

        with self.performance_logger.measure("media_module_init"):
            self.media_module = MediaModule(self.config)
            self.app = create_app(self.config, self.media_module)

        self.logger.info("FrameFlow media host initialized")

    def run(self) -> None:
        """Run the server (blocking call)"""
        host = self.config.system.api_host
        port = self.config.system.api_port
        self.logger.info(f"Starting media host on http://{host}:{port}")

        try:
            uvicorn.run(self.app, host=host, port=port, log_level=self.config.system.log_level.lower())
        except Exception as e:
            self.error_tracker.log_error(e, "server_run")
            raise
        finally:
            self.logger.info("FrameFlow media host stopped")


def main():
    """Main entry point for the application"""
    parser = argparse.ArgumentParser(description="FrameFlow media host")
    parser.add_argument("--config", type=str, help="Path to configuration file", default="config.json")
    parser.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level", default=None)
    parser.add_argument("--host", type=str, help="Override bind address", default=None)
    parser.add_argument("--port", type=int, help="Override port", default=None)

    args = parser.parse_args()

    host = FrameFlowMediaHost(args.config)

    if args.log_level:
        host.config.system.log_level = args.log_level
        logging.getLogger().setLevel(getattr(logging, args.log_level))
    if args.host:
        host.config.system.api_host = args.host
    if args.port:
        host.config.system.api_port = args.port

    try:
        host.run()
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
