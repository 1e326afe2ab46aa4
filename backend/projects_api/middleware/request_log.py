"""
Middleware that logs the method and URL of incoming requests.

Each matching request is logged as ``[METHOD] /path?query`` before it is
handed to the route.
"""
import logging
from typing import Callable, Iterable, Optional
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    Logs ``[METHOD] url`` for requests whose method is in ``methods``.

    A ``*`` entry in ``methods`` logs every request.
    """

    def __init__(
        self,
        app: ASGIApp,
        enabled: bool = True,
        methods: Optional[Iterable[str]] = None,
    ):
        super().__init__(app)
        self.enabled = enabled
        self.methods = {m.upper() for m in (methods or ["POST"])}

    def should_log(self, method: str) -> bool:
        return self.enabled and ("*" in self.methods or method.upper() in self.methods)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if self.should_log(request.method):
            url = request.url.path
            if request.url.query:
                url = f"{url}?{request.url.query}"
            logger.info(f"[{request.method.upper()}] {url}")
        return await call_next(request)


def configure_request_log_middleware(
    app: FastAPI,
    enabled: bool = True,
    methods: Optional[Iterable[str]] = None,
) -> None:
    """
    Add request logging to a FastAPI application.

    Args:
        app: FastAPI application instance
        enabled: Whether request logging is active
        methods: HTTP methods to log (default: POST only)
    """
    app.add_middleware(RequestLogMiddleware, enabled=enabled, methods=methods)
    if enabled:
        logger.info(f"✓ Request logging enabled for: {', '.join(sorted(m.upper() for m in (methods or ['POST'])))}")
    else:
        logger.info("Request logging disabled")
