from pydantic import BaseModel, validator
from typing import List, Optional
from enum import Enum

from ..constants import MAX_BATCH_URLS


class PlatformHintEnum(str, Enum):
    AUTO = "auto"
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"


class ParseRequest(BaseModel):
    url: str
    platform: Optional[PlatformHintEnum] = PlatformHintEnum.AUTO
    include_oembed: Optional[bool] = False


class BatchParseRequest(BaseModel):
    urls: List[str]

    @validator('urls')
    def validate_urls(cls, v):
        if not v:
            raise ValueError('At least one URL is required')
        if len(v) > MAX_BATCH_URLS:
            raise ValueError(f'Maximum {MAX_BATCH_URLS} URLs allowed per request')
        return v
