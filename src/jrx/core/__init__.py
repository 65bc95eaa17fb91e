"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    JrxError,
    RenderError,
    InvalidInputError,
    InvalidRootError,
    DuplicateKeyError,
    JSONParseError,
    ValidationError,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import safe_json_dumps, loads_object

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "JrxError",
    "RenderError",
    "InvalidInputError",
    "InvalidRootError",
    "DuplicateKeyError",
    "JSONParseError",
    "ValidationError",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "safe_json_dumps",
    "loads_object",
]
