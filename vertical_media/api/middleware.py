from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import time
import logging
import uuid

logger = logging.getLogger(__name__)

PLATFORM_HEADER = "X-Video-Platform"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with the video platform it resolved to

    /parse reports the recognised platform through the X-Video-Platform
    response header; /validate carries it as a query parameter.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        platform = response.headers.get(PLATFORM_HEADER) or request.query_params.get('platform') or '-'
        logger.info(
            f"Request {request_id}: {request.method} {request.url.path} "
            f"platform={platform} status={response.status_code} in {process_time:.3f}s"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.6f}"

        return response
