"""
JWT Token Service - issues and validates the bearer tokens of the API.

Tokens are HS256-signed and carry:
- sub:         user id as a string
- unique_name: username
- jti:         random id per issuance
- iss, aud, iat, exp

Validation checks signature, issuer, audience and expiry with no clock leeway.
There is no revocation; a token stays valid until it expires.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from logging import getLogger
from typing import Optional

import jwt

from flowing_links.config.settings import JwtSettings
from flowing_links.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidTokenError,
)

logger = getLogger(__name__)

ALGORITHM = "HS256"
MIN_KEY_LENGTH = 32
BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class TokenResult:
    token: str
    expires_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    username: str


class JwtTokenService:
    def __init__(self, settings: JwtSettings):
        self._settings = settings

    def validate(self) -> None:
        """Fail fast on an unusable signing key; called at application startup."""
        self._signing_key()

    def _signing_key(self) -> str:
        key = self._settings.key
        if not key or len(key) < MIN_KEY_LENGTH:
            raise ConfigurationError(
                f"JWT key must be at least {MIN_KEY_LENGTH} characters long"
            )
        return key

    def issue_token(self, user_id: int, username: str) -> TokenResult:
        key = self._signing_key()
        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=self._settings.expiry_in_minutes)

        payload = {
            "sub": str(user_id),
            "unique_name": username,
            "jti": str(uuid.uuid4()),
            "iss": self._settings.issuer,
            "aud": self._settings.audience,
            "iat": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, key, algorithm=ALGORITHM)
        return TokenResult(token=token, expires_at=expires_at)

    def decode(self, token: str) -> TokenClaims:
        """
        Validate a raw token and return the caller it names.

        Raises:
            InvalidTokenError: signature, structure, issuer, audience or expiry invalid
            AuthenticationError: sub claim missing or not an integer
        """
        try:
            claims = jwt.decode(
                token,
                self._signing_key(),
                algorithms=[ALGORITHM],
                audience=self._settings.audience,
                issuer=self._settings.issuer,
                # sub may be a JSON string or integer; it is checked below
                options={"require": ["exp", "iss", "aud"], "verify_sub": False},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("JWT token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug("Token rejected: %s", e)
            raise InvalidTokenError() from e

        subject = claims.get("sub")
        if subject is None or isinstance(subject, (bool, float)):
            raise AuthenticationError()
        try:
            user_id = int(subject)
        except (TypeError, ValueError):
            raise AuthenticationError()

        return TokenClaims(user_id=user_id, username=claims.get("unique_name", ""))

    def extract_caller_id(self, authorization_header: Optional[str]) -> int:
        """Resolve the user id from a raw "Authorization: Bearer <token>" header value."""
        if not authorization_header or not authorization_header.startswith(BEARER_PREFIX):
            raise AuthenticationError()

        token = authorization_header[len(BEARER_PREFIX):].strip()
        if not token:
            raise AuthenticationError()
        return self.decode(token).user_id
