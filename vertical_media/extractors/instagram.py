import re

from ..models.video import ParseResult, Platform
from .base import build_reference, first_match

PATTERNS = [
    re.compile(r"instagram\.com(?::\d+)?/reels?/([A-Za-z0-9_-]+)", re.IGNORECASE),
    re.compile(r"instagram\.com(?::\d+)?/p/([A-Za-z0-9_-]+)", re.IGNORECASE),
]


def extract_instagram(url: str) -> ParseResult:
    """Extract an Instagram shortcode from a reel or post permalink

    Post permalinks are embedded through the reel endpoint as well, so the
    embed URL always takes the /reel/<id>/embed/ form.
    """
    return build_reference(Platform.INSTAGRAM, first_match(PATTERNS, url), url)
