"""
Runtime configuration, read from the environment at import time.

    CLASH_LOG_LEVEL  logging level name (default: INFO)
    CLASH_LOG_JSON   emit JSON log lines when truthy
    CLASH_LOG_FILE   append logs to this file as well as stdout
"""

import os

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


CLASH_LOG_LEVEL = os.getenv("CLASH_LOG_LEVEL", "INFO").upper()
CLASH_LOG_JSON = env_flag("CLASH_LOG_JSON")
CLASH_LOG_FILE = os.getenv("CLASH_LOG_FILE") or None
