"""Profile API Router - the caller reading and editing their own account."""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status

from flowing_links.application.commands.profile import (
    ChangePasswordCommand,
    ChangePasswordHandler,
    UpdateProfileCommand,
    UpdateProfileHandler,
)
from flowing_links.application.dto.base import CamelModel
from flowing_links.application.dto.user import UserDTO
from flowing_links.application.queries.users import GetUserHandler, GetUserQuery
from flowing_links.domain.exceptions import EntityNotFoundError
from flowing_links.presentation.dependencies.auth import AuthUser, get_current_user


class ChangePasswordRequest(CamelModel):
    """Body of PUT /Profile/Password: {"newPassword": "..."}"""

    new_password: str = ""


router = APIRouter(prefix="/Profile", tags=["profile"])


@router.get("", response_model=UserDTO)
@inject
async def get_profile(
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(user_id=current_user.user_id))
    if user is None:
        raise EntityNotFoundError.for_id("User", current_user.user_id)
    return user


@router.put("", response_model=UserDTO)
@inject
async def update_profile(
    request: UserDTO,
    handler: FromDishka[UpdateProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    # Any id in the body is ignored; a user only ever edits their own account.
    command = UpdateProfileCommand(
        user_id=current_user.user_id, name=request.name, username=request.username
    )
    return await handler.execute(command)


@router.put("/Password", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def change_password(
    request: ChangePasswordRequest,
    handler: FromDishka[ChangePasswordHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        ChangePasswordCommand(user_id=current_user.user_id, new_password=request.new_password)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
