import logging
import sys
import threading

import pytest

from morris_ai import logging_setup


@pytest.fixture
def isolated_root_logging(monkeypatch):
    """Let a test call setup_logging() and put the root logger back afterwards."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)
    if hasattr(root, logging_setup._CONFIGURED_FLAG):
        delattr(root, logging_setup._CONFIGURED_FLAG)
