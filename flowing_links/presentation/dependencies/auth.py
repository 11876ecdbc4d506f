"""
Authentication Dependency for FastAPI.

Resolves the caller once per request from the bearer token and hands route
handlers a typed AuthUser. Failures raise AuthenticationError, which the app
maps to 401.

Usage:
    @router.get("")
    async def list_links(current_user: AuthUser = Depends(get_current_user)):
        ...
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from flowing_links.domain.entities.user import ADMIN_USER_ID
from flowing_links.domain.exceptions import AuthenticationError
from flowing_links.infrastructure.security import JwtTokenService


@dataclass(frozen=True)
class AuthUser:
    user_id: int
    username: str

    @property
    def is_admin(self) -> bool:
        return self.user_id == ADMIN_USER_ID


# auto_error=False so a missing header surfaces as our own 401 body
security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> JwtTokenService:
    return request.app.state.token_service


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: JwtTokenService = Depends(get_token_service),
) -> AuthUser:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    claims = token_service.decode(credentials.credentials)
    return AuthUser(user_id=claims.user_id, username=claims.username)
