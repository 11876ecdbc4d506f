"""
Authentication errors - Raised while resolving the caller from a bearer token.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    """The request carries no usable caller identity."""

    def __init__(self, message: str = "Unauthenticated"):
        super().__init__(message)
        self.message = message


class InvalidTokenError(AuthenticationError):
    """The bearer token failed signature, structure, issuer, audience or expiry checks."""

    def __init__(self, message: str = "Invalid JWT token"):
        super().__init__(message)
