import re
import logging
from typing import Dict, List, Union
import validators as url_validators

from ..constants import VIDEO_ID_PATTERNS
from ..models.video import FailureReason
from .logging import timed_operation

logger = logging.getLogger(__name__)

_ID_PATTERNS = {
    platform: re.compile(pattern) for platform, pattern in VIDEO_ID_PATTERNS.items()
}


def is_valid_id(video_id: str, platform) -> bool:
    """Check a video ID has the expected shape for its platform"""
    key = getattr(platform, 'value', platform)
    if isinstance(key, str):
        key = key.lower()
    pattern = _ID_PATTERNS.get(key)
    if pattern is None or not isinstance(video_id, str):
        return False
    return bool(pattern.fullmatch(video_id))


class URLValidator:
    """URL and identifier validation utilities"""

    @classmethod
    def is_valid_url(cls, url: str) -> bool:
        """Check if URL is well-formed"""
        if not url:
            return False
        try:
            return bool(url_validators.url(url))
        except url_validators.ValidationError:
            return False

    @classmethod
    def is_valid_id(cls, video_id: str, platform) -> bool:
        return is_valid_id(video_id, platform)

    @classmethod
    @timed_operation(logger, "Batch URL validation")
    def validate_batch_urls(cls, urls: List[str]) -> Dict[str, Union[Dict, List[str]]]:
        """Parse a batch of URLs and categorize them by platform"""
        from .url_parser import URLParser

        result = {
            'valid': {},
            'invalid': [],
            'unsupported': []
        }

        for url in urls:
            sanitized = URLParser.sanitize_url(url)
            if not cls.is_valid_url(sanitized):
                result['invalid'].append(url)
                continue

            parsed = URLParser.parse(sanitized)
            if parsed.ok:
                result['valid'].setdefault(parsed.platform.value, []).append(parsed)
            elif parsed.reason == FailureReason.UNSUPPORTED_PLATFORM:
                result['unsupported'].append(url)
            else:
                result['invalid'].append(url)

        logger.info(
            f"Batch of {len(urls)} URLs: "
            f"{sum(len(refs) for refs in result['valid'].values())} valid, "
            f"{len(result['invalid'])} invalid, {len(result['unsupported'])} unsupported"
        )
        return result
