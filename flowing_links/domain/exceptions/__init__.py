"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps them to HTTP status codes.
"""

from flowing_links.domain.exceptions.domain_error import DomainError
from flowing_links.domain.exceptions.entity_not_found import EntityNotFoundError
from flowing_links.domain.exceptions.access_denied import AccessDeniedError
from flowing_links.domain.exceptions.authentication import (
    AuthenticationError,
    InvalidTokenError,
)
from flowing_links.domain.exceptions.configuration_error import ConfigurationError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "AuthenticationError",
    "InvalidTokenError",
    "ConfigurationError",
]
