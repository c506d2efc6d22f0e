from __future__ import annotations

import os
import sys
import tempfile

from loguru import logger

# 1. Log directory
# Dev: <repo root>/logs. Frozen: the per-user documents folder, since the
# install directory is usually read-only.
if getattr(sys, "frozen", False):
    LOG_DIR = os.path.join(os.path.expanduser("~"), "Documents", "VidNotes", "logs")
else:
    # src/vidnotes/utils/logger.py -> three levels up is the repo root
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../"))
    LOG_DIR = os.path.join(BASE_DIR, "logs")

if not os.path.exists(LOG_DIR):
    try:
        os.makedirs(LOG_DIR)
    except OSError:
        # No permission to create it: fall back to the temp directory
        LOG_DIR = os.path.join(tempfile.gettempdir(), "VidNotes_logs")
        os.makedirs(LOG_DIR, exist_ok=True)


# 2. Reset default handlers
logger.remove()


# 3. Console sink (INFO and above)
_console_sink = getattr(sys, "__stderr__", None) or sys.stderr
if _console_sink is not None:
    logger.add(
        _console_sink,
        level="INFO",
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
    )


# 4. File sink: everything from DEBUG, rotated at midnight, 7 days kept
logger.add(
    os.path.join(LOG_DIR, "app_{time:YYYY-MM-DD}.log"),
    level="DEBUG",
    rotation="00:00",
    retention="7 days",
    compression="zip",
    encoding="utf-8",
    enqueue=True,
    backtrace=True,
    diagnose=True,
)


# 5. Route crashes into the log as well
def handle_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("Uncaught exception")


sys.excepthook = handle_exception
