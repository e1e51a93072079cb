from typing import Optional
import logging

from ..config.settings import settings
from ..enrichment.oembed import OEmbedClient

logger = logging.getLogger(__name__)

oembed_client = OEmbedClient(timeout=settings.oembed_timeout)


def get_oembed_client() -> Optional[OEmbedClient]:
    """Dependency to get the oEmbed client, None when enrichment is disabled"""
    if not settings.oembed_enabled:
        return None
    return oembed_client
