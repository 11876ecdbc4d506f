"""
Auth API Router - exchanges credentials for a bearer token.

Flow:
  POST /Auth → AuthenticateQuery → AuthenticateHandler → User
                                                          ↓
  LoginResponseDTO ← JwtTokenService.issue_token ←────────┘
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from flowing_links.application.dto.auth import LoginRequestDTO, LoginResponseDTO
from flowing_links.application.queries.auth import AuthenticateHandler, AuthenticateQuery
from flowing_links.domain.exceptions import DomainError
from flowing_links.infrastructure.security import JwtTokenService

logger = getLogger(__name__)

router = APIRouter(prefix="/Auth", tags=["auth"])


@router.post("", response_model=LoginResponseDTO)
@inject
async def login(
    request: LoginRequestDTO,
    handler: FromDishka[AuthenticateHandler],
    token_service: FromDishka[JwtTokenService],
):
    """Authenticate and return {name, isAdmin, token, expires}."""
    try:
        user = await handler.execute(
            AuthenticateQuery(username=request.username, password=request.password)
        )
    except DomainError as e:
        logger.warning("Authentication failed: %s", e.message)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"message": e.message}
        )

    result = token_service.issue_token(user.id, user.username)
    logger.info("User %s logged in", user.id)
    return LoginResponseDTO(
        name=user.name,
        is_admin=user.is_admin,
        token=result.token,
        expires=result.expires_at,
    )
