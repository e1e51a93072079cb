import logging
import re
from typing import Iterable, Optional

from ..constants import EMBED_URL_TEMPLATES
from ..models.video import FailureReason, ParseFailure, ParseResult, Platform, VideoReference
from ..utils.validators import is_valid_id

logger = logging.getLogger(__name__)


def first_match(patterns: Iterable[re.Pattern], url: str) -> Optional[str]:
    """Return group 1 of the first pattern that matches, or None"""
    for pattern in patterns:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def build_reference(platform: Platform, video_id: Optional[str], url: str) -> ParseResult:
    """Turn an extracted identifier into a VideoReference, or a failure"""
    if not video_id or not is_valid_id(video_id, platform):
        logger.debug(f"No usable {platform.value} identifier in {url!r}")
        return ParseFailure(FailureReason.NO_IDENTIFIER_FOUND, url)

    return VideoReference(
        platform=platform,
        video_id=video_id,
        embed_url=EMBED_URL_TEMPLATES[platform.value].format(video_id=video_id),
        source_url=url,
    )
