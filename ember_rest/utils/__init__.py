"""Utility modules.

Includes:
- Logging configuration
- Structured build logging
- Record serialization
"""

from .build_logger import BuildLogContext, logged_build
from .logging_config import JsonFormatter, get_logger, setup_logging
from .serialization import dumps_document, is_record, to_plain_record

__all__ = [
    "setup_logging",
    "get_logger",
    "JsonFormatter",
    "BuildLogContext",
    "logged_build",
    "to_plain_record",
    "is_record",
    "dumps_document",
]
