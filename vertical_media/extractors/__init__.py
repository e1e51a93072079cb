"""
Per-platform video identifier extractors

Each extractor walks an ordered list of compiled patterns and stops at the
first one that matches.
"""

from typing import Callable, Dict

from ..models.video import ParseResult, Platform
from .youtube import extract_youtube
from .instagram import extract_instagram
from .tiktok import extract_tiktok

EXTRACTORS: Dict[Platform, Callable[[str], ParseResult]] = {
    Platform.YOUTUBE: extract_youtube,
    Platform.INSTAGRAM: extract_instagram,
    Platform.TIKTOK: extract_tiktok,
}

__all__ = [
    "EXTRACTORS",
    "extract_youtube",
    "extract_instagram",
    "extract_tiktok",
]
