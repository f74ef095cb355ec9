from __future__ import annotations

import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Union

from .. import config

# Simple, centralized logging setup for the engine and its callers.
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line; the message is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return jsonlib.dumps(payload, ensure_ascii=False)


def configure_logging(
    level: Union[str, int, None] = None,
    *,
    json: bool | None = None,
    logfile: str | Path | None = None,
) -> None:
    """
    Configure the root logger with stdout + optional file handler.

    Args:
        level: Logging level name or int. Defaults to CLASH_LOG_LEVEL.
        json: Emit JSON lines when True. Defaults to CLASH_LOG_JSON.
        logfile: File path to append logs to. Defaults to CLASH_LOG_FILE (unset: no file).
    """
    if level is None:
        level = config.CLASH_LOG_LEVEL
    if json is None:
        json = config.CLASH_LOG_JSON
    if logfile is None:
        logfile = config.CLASH_LOG_FILE

    formatter = JsonFormatter() if json else logging.Formatter(DEFAULT_FORMAT)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    handlers.append(console)

    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)

    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger; configure_logging() should be called once on startup."""
    return logging.getLogger(name)
