import time
from logging import getLogger

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = getLogger(__name__)


def client_ip(request: Request) -> str:
    """First address of X-Forwarded-For when behind a proxy, else the peer address."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs start, completion and failure of every request with elapsed time."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path
        ip = client_ip(request)

        logger.info("HTTP %s %s started from %s", method, path, ip)
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception("HTTP %s %s failed after %.1f ms", method, path, elapsed_ms)
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "HTTP %s %s responded %s in %.1f ms",
            method,
            path,
            response.status_code,
            elapsed_ms,
        )
        return response
