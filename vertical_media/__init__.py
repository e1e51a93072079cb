"""
Recognise YouTube Shorts, Instagram Reels and TikTok URLs and normalise them
into embeddable references.
"""

from .models.video import Platform, FailureReason, VideoReference, ParseFailure, ParseResult
from .utils.url_parser import URLParser, parse, detect_platform, supported_platforms
from .utils.validators import URLValidator, is_valid_id

__version__ = "1.0.0"

__all__ = [
    "Platform",
    "FailureReason",
    "VideoReference",
    "ParseFailure",
    "ParseResult",
    "URLParser",
    "URLValidator",
    "parse",
    "detect_platform",
    "supported_platforms",
    "is_valid_id",
]
