from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import Dict, Optional
import logging

from ..enrichment.oembed import OEmbedClient
from ..models.requests import BatchParseRequest, ParseRequest, PlatformHintEnum
from ..models.responses import BatchParseResponse, ParseResponse, ValidationResponse
from ..models.video import FailureReason, VideoReference
from ..utils.url_parser import URLParser
from ..utils.validators import URLValidator
from .dependencies import get_oembed_client
from .middleware import PLATFORM_HEADER

logger = logging.getLogger(__name__)

router = APIRouter()

FAILURE_STATUS = {
    FailureReason.EMPTY_INPUT: 400,
    FailureReason.UNSUPPORTED_PLATFORM: 422,
    FailureReason.NO_IDENTIFIER_FOUND: 422,
}


def to_response(reference: VideoReference, oembed: Optional[Dict] = None) -> ParseResponse:
    return ParseResponse(**reference.to_dict(), element_id=reference.element_id(), oembed=oembed)


@router.post('/parse', response_model=ParseResponse)
def parse_url(
    request: ParseRequest,
    response: Response,
    oembed_client: Optional[OEmbedClient] = Depends(get_oembed_client)
):
    """Recognise a single video URL"""
    platform = request.platform or PlatformHintEnum.AUTO
    result = URLParser.parse(request.url, platform.value)

    if not result.ok:
        logger.info(f"Parse failed ({result.reason.value}): {request.url!r}")
        raise HTTPException(
            status_code=FAILURE_STATUS[result.reason],
            detail={"reason": result.reason.value, "message": result.message}
        )

    response.headers[PLATFORM_HEADER] = result.platform.value

    oembed = None
    if request.include_oembed and oembed_client is not None:
        oembed = oembed_client.enrich(result)

    return to_response(result, oembed)


@router.post('/parse/batch', response_model=BatchParseResponse)
async def parse_batch(request: BatchParseRequest):
    """Recognise a batch of URLs and group them by platform"""
    batch = URLValidator.validate_batch_urls(request.urls)

    return BatchParseResponse(
        valid={
            platform: [to_response(reference) for reference in references]
            for platform, references in batch['valid'].items()
        },
        invalid=batch['invalid'],
        unsupported=batch['unsupported']
    )


@router.get('/validate', response_model=ValidationResponse)
async def validate_video_id(
    video_id: str = Query(..., min_length=1),
    platform: PlatformHintEnum = Query(...)
):
    """Check a video ID has the expected shape for a platform"""
    if platform == PlatformHintEnum.AUTO:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An explicit platform is required to validate an ID"
        )

    return ValidationResponse(
        video_id=video_id,
        platform=platform.value,
        valid=URLValidator.is_valid_id(video_id, platform.value)
    )


@router.get('/platforms')
async def list_platforms():
    """List accepted platform hints with display labels"""
    return URLParser.supported_platforms()
