"""
config.py - Central configuration for the file server.

This module stores all configurable constants related to:
- The served text file (path, encoding, route)
- Logging
- The uvicorn bind address
"""

import os
from typing import Optional


class ConfigurationError(Exception):
    """Raised when the server cannot be built from the given configuration."""


# Served file configuration:
FILE_PATH: str = os.getenv("FILE_PATH", "")                 # Required, checked by `resolve_file_path()`
FILE_ENCODING: str = os.getenv("FILE_ENCODING", "utf-8")
FILE_ROUTE: str = "/api/file"


# Logging configuration:
LOG_NAME: str = "file_server"
LOG_FILE: str = os.getenv("LOG_FILE", "app.log")
LOG_TO_CONSOLE: bool = os.getenv("LOG_TO_CONSOLE", "false").lower() == "true"


# Server configuration:
SERVER_HOST: str = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8000"))


def resolve_file_path(value: Optional[str]) -> str:
    """Return the configured file path, or raise `ConfigurationError` if it is missing."""

    if value is None or not value.strip():
        raise ConfigurationError(
            "No file path configured. Set the `FILE_PATH` environment variable."
        )
    return value.strip()
