"""
AccessDeniedError - Raised when the caller lacks permission for an operation.
Maps to: HTTP 400 Bad Request (admin-only rules are reported as business errors)
"""

from flowing_links.domain.exceptions.domain_error import DomainError


class AccessDeniedError(DomainError):
    """Raised when the caller lacks permission to perform an operation"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
