"""
DomainError - Raised when a business rule is violated.
Maps to: HTTP 400 Bad Request
"""


class DomainError(Exception):
    """Exception raised for business rule violations (duplicates, bad credentials, ...)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
