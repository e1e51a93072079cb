import re

from ..models.video import ParseResult, Platform
from .base import build_reference, first_match

# Most specific path forms first, bare ID last
PATTERNS = [
    re.compile(r"youtube\.com(?::\d+)?/shorts/([A-Za-z0-9_-]+)", re.IGNORECASE),
    re.compile(r"youtube\.com(?::\d+)?/watch\?v=([A-Za-z0-9_-]+)", re.IGNORECASE),
    re.compile(r"youtu\.be(?::\d+)?/([A-Za-z0-9_-]+)", re.IGNORECASE),
    re.compile(r"youtube\.com(?::\d+)?/embed/([A-Za-z0-9_-]+)", re.IGNORECASE),
    re.compile(r"^([A-Za-z0-9_-]{11})$"),
]


def extract_youtube(url: str) -> ParseResult:
    """Extract a YouTube Shorts / video ID from a URL or a bare 11-character ID"""
    return build_reference(Platform.YOUTUBE, first_match(PATTERNS, url), url)
