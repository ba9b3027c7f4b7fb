"""
Logging configuration for the FrameFlow media host.

Console output is colored, the log file rotates, and noisy server loggers
are turned down unless debugging.
"""

import logging
import logging.handlers
import os
import sys
import time
from collections import Counter
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterator, Optional

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'

# (level when debugging, level otherwise)
COMPONENT_LEVELS = {
    'frameflow_media.media.application.protocol_service': (logging.DEBUG, logging.INFO),
    'uvicorn': (logging.INFO, logging.WARNING),
    'uvicorn.access': (logging.INFO, logging.WARNING),
    'fastapi': (logging.WARNING, logging.WARNING),
}


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        color = self.COLORS.get(levelname)
        if color:
            record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers see the same record
            record.levelname = levelname


class FrameFlowLogger:
    """Installs the media host's handlers on the root logger"""

    HANDLER_MARK = "_frameflow_handler"

    def __init__(self, log_level: str = "INFO", log_file: Optional[str] = None):
        self.log_level = log_level.upper()
        self.log_file = log_file
        self.level = getattr(logging, self.log_level, logging.INFO)

        self._install()

    def _install(self) -> None:
        root_logger = logging.getLogger()
        root_logger.setLevel(self.level)
        self._remove_own_handlers(root_logger)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
        self._attach(root_logger, console_handler)

        if self.log_file:
            file_handler = self._create_file_handler(self.log_file)
            if file_handler:
                self._attach(root_logger, file_handler)

        self._apply_component_levels()

        logging.getLogger(__name__).info(f"Logging initialized - Level: {self.log_level}, File: {self.log_file}")

    def _create_file_handler(self, log_file: str) -> Optional[logging.Handler]:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}")
            return None

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        return handler

    def _attach(self, root_logger: logging.Logger, handler: logging.Handler) -> None:
        setattr(handler, self.HANDLER_MARK, True)
        root_logger.addHandler(handler)

    def _remove_own_handlers(self, root_logger: logging.Logger) -> None:
        for handler in root_logger.handlers[:]:
            if getattr(handler, self.HANDLER_MARK, False):
                root_logger.removeHandler(handler)
                handler.close()

    def _apply_component_levels(self) -> None:
        debugging = self.level <= logging.DEBUG
        for name, (debug_level, normal_level) in COMPONENT_LEVELS.items():
            logging.getLogger(name).setLevel(debug_level if debugging else normal_level)

    @staticmethod
    def setup_exception_logging():
        """Route uncaught exceptions through logging"""

        def handle_exception(exc_type, exc_value, exc_traceback):
            if issubclass(exc_type, KeyboardInterrupt):
                sys.__excepthook__(exc_type, exc_value, exc_traceback)
                return

            logging.getLogger("uncaught_exception").critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

        sys.excepthook = handle_exception


class PerformanceLogger:
    """Times named operations and logs how long they took"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(f"performance.{name}")
        self.durations: Dict[str, float] = {}

    @contextmanager
    def measure(self, operation: str) -> Iterator[None]:
        self.logger.debug(f"Started: {operation}")
        started = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - started
            self.durations[operation] = duration
            self.logger.info(f"Completed: {operation} in {duration:.3f}s")


class ErrorTracker:
    """Count and log errors per context"""

    def __init__(self, component_name: str):
        self.component_name = component_name
        self.logger = logging.getLogger(f"errors.{component_name}")
        self.by_context: Counter = Counter()
        self.last_error_time: Optional[datetime] = None

    @property
    def error_count(self) -> int:
        return sum(self.by_context.values())

    def log_error(self, error: Exception, context: str = "") -> None:
        self.by_context[context or "unknown"] += 1
        self.last_error_time = datetime.now()

        where = f" ({context})" if context else ""
        self.logger.error(f"Error in {self.component_name}{where}: {error}", exc_info=True)

    def get_error_stats(self) -> dict:
        return {
            "component": self.component_name,
            "error_count": self.error_count,
            "by_context": dict(self.by_context),
            "last_error_time": self.last_error_time.isoformat() if self.last_error_time else None
        }


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> FrameFlowLogger:
    """Setup logging for the entire application"""
    logger_setup = FrameFlowLogger(log_level=log_level, log_file=log_file)
    FrameFlowLogger.setup_exception_logging()
    return logger_setup


def get_performance_logger(component_name: str) -> PerformanceLogger:
    return PerformanceLogger(component_name)


def get_error_tracker(component_name: str) -> ErrorTracker:
    return ErrorTracker(component_name)
