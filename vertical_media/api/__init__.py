from .routes import router
from .middleware import RequestLoggingMiddleware

__all__ = ["router", "RequestLoggingMiddleware"]
