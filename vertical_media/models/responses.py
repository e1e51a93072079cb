from pydantic import BaseModel
from typing import Optional, Dict, List, Any


class ParseResponse(BaseModel):
    platform: str
    video_id: str
    embed_url: str
    source_url: str
    element_id: str
    oembed: Optional[Dict[str, Any]] = None


class BatchParseResponse(BaseModel):
    valid: Dict[str, List[ParseResponse]]
    invalid: List[str]
    unsupported: List[str]


class ValidationResponse(BaseModel):
    video_id: str
    platform: str
    valid: bool
