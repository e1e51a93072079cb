import re
import logging
from typing import Dict, Optional, Union
from urllib.parse import urlparse

from ..constants import ALLOWED_PROTOCOLS, AUTO, PLATFORM_LABELS
from ..extractors import EXTRACTORS
from ..models.video import FailureReason, ParseFailure, ParseResult, Platform

logger = logging.getLogger(__name__)

# Anything outside this set is dropped by the sanitizer (non-ASCII is kept)
_UNSAFE_CHARS = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\u0080-\U0010ffff]", re.IGNORECASE)
_ENCODED_LINE_BREAKS = re.compile(r"%0[da]", re.IGNORECASE)

# Checked in order, first match wins
HOST_RULES = [
    (re.compile(r"(?:youtube\.com|youtu\.be)", re.IGNORECASE), Platform.YOUTUBE),
    (re.compile(r"instagram\.com", re.IGNORECASE), Platform.INSTAGRAM),
    (re.compile(r"(?:tiktok\.com|vm\.tiktok\.com)", re.IGNORECASE), Platform.TIKTOK),
]


class URLParser:
    """Utility class for recognising vertical video URLs"""

    @staticmethod
    def sanitize_url(url: str) -> str:
        """Trim a raw URL and strip characters that are unsafe in an href

        Returns an empty string when nothing usable is left or when the URL
        uses a protocol outside ALLOWED_PROTOCOLS.
        """
        if not url:
            return ""

        url = url.strip().replace(' ', '%20')
        url = _UNSAFE_CHARS.sub('', url)
        if not url:
            return ""

        if not url.lower().startswith('mailto:'):
            # Removing one pair can form another, e.g. %0%0dd
            while _ENCODED_LINE_BREAKS.search(url):
                url = _ENCODED_LINE_BREAKS.sub('', url)

        url = url.replace(';//', '://')

        scheme, sep, _ = url.partition(':')
        # "www.youtube.com:443/..." is a host with a port, not a scheme
        if sep and not any(c in scheme for c in '/?.'):
            if scheme.lower() not in ALLOWED_PROTOCOLS:
                logger.debug(f"Rejected URL with protocol {scheme!r}")
                return ""

        return url

    @staticmethod
    def extract_host(url: str) -> Optional[str]:
        """Return the lower-cased host of a URL, or None"""
        try:
            parsed = urlparse(url)
            if not parsed.netloc and (not parsed.scheme or '.' in parsed.scheme):
                # Scheme-less "www.youtube.com[:443]/shorts/..." style input
                first_segment = url.split('/', 1)[0]
                if '.' in first_segment:
                    parsed = urlparse('//' + url)
            host = parsed.hostname
        except ValueError:
            return None
        return host or None

    @staticmethod
    def detect_platform(url: str) -> Optional[Platform]:
        """Auto-detect platform from the URL host"""
        host = URLParser.extract_host(url)
        if not host:
            return None

        for pattern, platform in HOST_RULES:
            if pattern.search(host):
                return platform
        return None

    @staticmethod
    def parse(url: str, platform: Union[str, Platform] = AUTO) -> ParseResult:
        """Recognise a video URL and build its embed reference

        Args:
            url: Raw, user supplied URL (or bare YouTube ID with an explicit hint)
            platform: 'auto' or one of the supported platforms

        Returns:
            VideoReference on success, ParseFailure otherwise
        """
        url = URLParser.sanitize_url(url)
        if not url:
            return ParseFailure(FailureReason.EMPTY_INPUT, url)

        hint = str(getattr(platform, 'value', platform) or AUTO).lower()
        if hint == AUTO:
            detected = URLParser.detect_platform(url)
        else:
            try:
                detected = Platform(hint)
            except ValueError:
                detected = None

        if detected is None:
            logger.debug(f"No supported platform for {url!r} (hint={hint!r})")
            return ParseFailure(FailureReason.UNSUPPORTED_PLATFORM, url)

        return EXTRACTORS[detected](url)

    @staticmethod
    def supported_platforms() -> Dict[str, str]:
        """Platform hints accepted by parse(), with display labels"""
        return dict(PLATFORM_LABELS)


def parse(url: str, platform: Union[str, Platform] = AUTO) -> ParseResult:
    return URLParser.parse(url, platform)


def detect_platform(url: str) -> Optional[Platform]:
    return URLParser.detect_platform(url)


def supported_platforms() -> Dict[str, str]:
    return URLParser.supported_platforms()
