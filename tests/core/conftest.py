import logging
import sys

import pytest

from frameflow_media.core.logging_config import FrameFlowLogger


@pytest.fixture
def restore_logging():
    """Detach the handlers setup_logging adds to the root logger."""
    root = logging.getLogger()
    level, hook = root.level, sys.excepthook
    yield
    for handler in root.handlers[:]:
        if getattr(handler, FrameFlowLogger.HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    sys.excepthook = hook
