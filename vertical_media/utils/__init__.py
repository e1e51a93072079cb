"""
Utilities package: URL parsing, validation and logging helpers

url_parser is not re-exported here: it imports the extractors, which import
validators.
"""

from .validators import URLValidator, is_valid_id
from .logging import setup_logging, get_logger, timed_operation

__all__ = [
    "URLValidator",
    "is_valid_id",
    "setup_logging",
    "get_logger",
    "timed_operation",
]
