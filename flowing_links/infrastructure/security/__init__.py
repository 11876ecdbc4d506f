"""Security adapters: token issuing/validation and password hashing."""

from flowing_links.infrastructure.security.jwt_token_service import (
    JwtTokenService,
    TokenClaims,
    TokenResult,
)
from flowing_links.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)

__all__ = ["JwtTokenService", "TokenClaims", "TokenResult", "BcryptPasswordHasher"]
