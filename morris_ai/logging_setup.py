from __future__ import annotations

import logging
import pathlib
import sys
import threading
import time
import traceback
from typing import Optional

import orjson

LOG_FILE_NAME = "morris-ai.log"

_CONFIGURED_FLAG = "_morris_logging_configured"


def get_log_path() -> pathlib.Path:
    return pathlib.Path.cwd() / LOG_FILE_NAME


def setup_logging(
    overwrite: bool = True,
    level: int = logging.DEBUG,
    log_path: Optional[pathlib.Path] = None,
) -> None:
    """Configure root logging to a single file plus stderr.

    - Overwrites the log file on first setup (per process) if overwrite is True
    - Adds a STDERR handler for immediate visibility
    - Installs sys.excepthook and threading excepthook
    - Captures warnings via logging
    """
    root_logger = logging.getLogger()
    if getattr(root_logger, _CONFIGURED_FLAG, False):
        return
    log_path = log_path or get_log_path()

    fmt = "%(asctime)s.%(msecs)03d %(levelname)s [%(process)d:%(threadName)s] %(name)s - %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    handlers: list[logging.Handler] = []
    file_mode = "w" if overwrite else "a"
    file_handler = logging.FileHandler(log_path, mode=file_mode, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    handlers.append(file_handler)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    handlers.append(stderr_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    setattr(root_logger, _CONFIGURED_FLAG, True)

    logging.captureWarnings(True)

    sys.excepthook = _log_unhandled_exception  # type: ignore[assignment]
    threading.excepthook = _log_thread_exception  # type: ignore[attr-defined]


def _log_unhandled_exception(exc_type, exc_value, exc_tb) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("unhandled")
    tb_str = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.critical("Unhandled exception:\n%s", tb_str)


def _log_thread_exception(args) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("thread")
    tb_str = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
    logger.critical("Unhandled thread exception in %s:\n%s", getattr(args, "thread", None), tb_str)


def log_event(module: str, event: str, **kwargs) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line on logger ``event.<module>`` so it reaches the
    log file configured by setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    line = orjson.dumps(payload).decode("utf-8")
    logging.getLogger(f"event.{module}").info(line)
