"""HTTP middlewares: correlation id, request logging, security headers."""

from flowing_links.presentation.middleware.correlation_id import CorrelationIdMiddleware
from flowing_links.presentation.middleware.request_logging import RequestLoggingMiddleware
from flowing_links.presentation.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
]
