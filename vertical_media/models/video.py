import hashlib
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..constants import VIDEO_ID_PATTERNS


class Platform(str, Enum):
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"


class FailureReason(str, Enum):
    EMPTY_INPUT = "empty_input"
    UNSUPPORTED_PLATFORM = "unsupported_platform"
    NO_IDENTIFIER_FOUND = "no_identifier_found"


FAILURE_MESSAGES = {
    FailureReason.EMPTY_INPUT: "URL is empty",
    FailureReason.UNSUPPORTED_PLATFORM: "URL does not belong to a supported platform",
    FailureReason.NO_IDENTIFIER_FOUND: "No video identifier found in URL",
}


@dataclass(frozen=True)
class VideoReference:
    """A recognised vertical video, ready to be embedded"""
    platform: Platform
    video_id: str
    embed_url: str
    source_url: str

    def __post_init__(self):
        """Refuse to build a reference around a malformed identifier"""
        platform = Platform(self.platform)
        object.__setattr__(self, 'platform', platform)

        if not self.video_id or not re.fullmatch(VIDEO_ID_PATTERNS[platform.value], self.video_id):
            raise ValueError(f"Invalid {platform.value} video ID: {self.video_id!r}")

    @property
    def ok(self) -> bool:
        return True

    @property
    def content_hash(self) -> str:
        """Stable digest of the embed-relevant fields"""
        payload = f"{self.platform.value}|{self.video_id}|{self.embed_url}"
        return hashlib.sha1(payload.encode('utf-8')).hexdigest()

    def element_id(self, prefix: str = "jvm-video") -> str:
        """Unique DOM id for renderers, derived from the content hash"""
        return f"{prefix}-{self.content_hash[:12]}"

    def to_dict(self) -> dict:
        return {
            'platform': self.platform.value,
            'video_id': self.video_id,
            'embed_url': self.embed_url,
            'source_url': self.source_url,
        }


@dataclass(frozen=True)
class ParseFailure:
    """Why a URL could not be turned into a VideoReference"""
    reason: FailureReason
    url: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return FAILURE_MESSAGES[self.reason]


ParseResult = Union[VideoReference, ParseFailure]
