"""
Constants shared by the parser, the validators and the outer surfaces
"""

AUTO = 'auto'

# Hint -> label, in display order
PLATFORM_LABELS = {
    AUTO: 'Auto Detect',
    'youtube': 'YouTube Shorts',
    'instagram': 'Instagram Reels',
    'tiktok': 'TikTok',
}

# Canonical iframe endpoints
EMBED_URL_TEMPLATES = {
    'youtube': 'https://www.youtube.com/embed/{video_id}',
    'instagram': 'https://www.instagram.com/reel/{video_id}/embed/',
    'tiktok': 'https://www.tiktok.com/embed/v2/{video_id}',
}

# Identifier shapes used for re-validation
VIDEO_ID_PATTERNS = {
    'youtube': r'^[A-Za-z0-9_-]{11}$',
    'instagram': r'^[A-Za-z0-9_-]+$',
    'tiktok': r'^[A-Za-z0-9]+$',
}

# Schemes accepted by the URL sanitizer
ALLOWED_PROTOCOLS = (
    'http', 'https', 'ftp', 'ftps', 'mailto', 'news', 'irc', 'irc6', 'ircs',
    'gopher', 'nntp', 'feed', 'telnet', 'mms', 'rtsp', 'sms', 'svn', 'tel',
    'fax', 'xmpp', 'webcal', 'urn',
)

TIKTOK_OEMBED_ENDPOINT = 'https://www.tiktok.com/oembed'

MAX_BATCH_URLS = 100
