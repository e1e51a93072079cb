import re

from ..models.video import ParseResult, Platform
from .base import build_reference, first_match

PATTERNS = [
    re.compile(r"tiktok\.com(?::\d+)?/@[^/]+/video/(\d+)", re.IGNORECASE),
    # Short links keep their code as the ID; resolving them needs a redirect
    re.compile(r"(?:vm\.tiktok\.com(?::\d+)?|tiktok\.com(?::\d+)?/t)/([A-Za-z0-9]+)", re.IGNORECASE),
]


def extract_tiktok(url: str) -> ParseResult:
    """Extract a TikTok numeric video ID or short-link code"""
    return build_reference(Platform.TIKTOK, first_match(PATTERNS, url), url)
