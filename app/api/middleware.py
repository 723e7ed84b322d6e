import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request; 4xx at warning and 5xx at error level."""

    def __init__(self, app: ASGIApp, logger: logging.Logger):
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - started) * 1000

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        client = request.client.host if request.client else "-"
        self.logger.log(
            level,
            f"{request.method} {request.url.path} status={response.status_code} "
            f"query={request.url.query or '-'} client={client} latency_ms={latency_ms:.1f}",
        )
        return response
