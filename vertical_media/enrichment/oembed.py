import re
import logging
from typing import Any, Dict, Optional, Union

import requests

from ..constants import TIKTOK_OEMBED_ENDPOINT
from ..models.video import Platform, VideoReference

logger = logging.getLogger(__name__)

_SCRIPT_TAGS = re.compile(r"<script\b[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)


def strip_scripts(html: str) -> str:
    """Remove <script> elements from oEmbed HTML before passing it through"""
    if not html:
        return ""
    return _SCRIPT_TAGS.sub('', html)


class OEmbedClient:
    """Best-effort oEmbed lookups used to enrich parsed videos

    Only TikTok is queried. Instagram's endpoint needs a Facebook app access
    token, so it is treated as unavailable; YouTube embeds need no metadata.
    Failures never raise, they return None.
    """

    def __init__(self, timeout: float = 10, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session
        self.logger = logger

    def fetch(self, url: str, platform: Union[str, Platform]) -> Optional[Dict[str, Any]]:
        """Fetch oEmbed data for a video URL"""
        platform = getattr(platform, 'value', platform)

        if platform == Platform.INSTAGRAM.value:
            self.logger.debug("Instagram oEmbed requires an access token, skipping")
            return None
        if platform != Platform.TIKTOK.value:
            return None

        get = self.session.get if self.session is not None else requests.get
        try:
            response = get(
                TIKTOK_OEMBED_ENDPOINT,
                params={"url": url},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            self.logger.warning(f"oEmbed request failed for {url}: {str(e)}")
            return None
        except ValueError as e:
            self.logger.warning(f"oEmbed response for {url} is not valid JSON: {str(e)}")
            return None

        if not data or not isinstance(data, dict):
            return None

        if data.get('html'):
            data['html'] = strip_scripts(data['html'])
        return data

    def enrich(self, reference: VideoReference) -> Optional[Dict[str, Any]]:
        """Fetch oEmbed data for an already parsed video"""
        return self.fetch(reference.source_url, reference.platform)
