from datetime import datetime, timezone

from fastapi import FastAPI
import logging

from . import __version__
from .api import RequestLoggingMiddleware, router
from .config.settings import settings
from .utils.logging import setup_logging
from .utils.url_parser import URLParser

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Vertical Media",
    description="Recognise YouTube Shorts, Instagram Reels and TikTok URLs and build embed references",
    version=__version__,
    debug=settings.debug
)

app.add_middleware(RequestLoggingMiddleware)
app.include_router(router)


@app.get('/health')
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "available_platforms": [p for p in URLParser.supported_platforms() if p != 'auto'],
        "oembed_enabled": settings.oembed_enabled,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


def run():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == '__main__':
    run()
