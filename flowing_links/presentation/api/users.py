"""
User API Router - account administration.

Only the admin (user id 1) may create, update or delete users; the handlers
enforce it. Any authenticated user may list users and read their own account.
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status

from flowing_links.application.commands.users import (
    DeleteUserCommand,
    DeleteUserHandler,
    SaveUserCommand,
    SaveUserHandler,
)
from flowing_links.application.dto.user import UserDTO
from flowing_links.application.queries.users import (
    GetUserHandler,
    GetUserQuery,
    ListUsersHandler,
    ListUsersQuery,
    UsernameExistsHandler,
    UsernameExistsQuery,
)
from flowing_links.domain.exceptions import EntityNotFoundError
from flowing_links.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/User", tags=["users"])


@router.get("", response_model=list[UserDTO])
@inject
async def list_users(
    handler: FromDishka[ListUsersHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(ListUsersQuery())


# Declared before /{id} so "me" is not parsed as an id
@router.get("/me", response_model=UserDTO)
@inject
async def get_me(
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(user_id=current_user.user_id))
    if user is None:
        raise EntityNotFoundError.for_id("User", current_user.user_id)
    return user


@router.get("/check-username/{username}", response_model=bool)
@inject
async def check_username(
    username: str,
    handler: FromDishka[UsernameExistsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(UsernameExistsQuery(username=username))


@router.get("/{id}", response_model=UserDTO)
@inject
async def get_user(
    id: int,
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(user_id=id, caller_id=current_user.user_id))
    if user is None:
        raise EntityNotFoundError.for_id("User", id)
    return user


@router.post("", response_model=UserDTO)
@inject
async def create_user(
    request: UserDTO,
    handler: FromDishka[SaveUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    dto = request.model_copy(update={"id": 0})
    return await handler.execute(SaveUserCommand(user=dto, caller_id=current_user.user_id))


@router.put("/{id}", response_model=UserDTO)
@inject
async def update_user(
    id: int,
    request: UserDTO,
    handler: FromDishka[SaveUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    dto = request.model_copy(update={"id": id})
    return await handler.execute(SaveUserCommand(user=dto, caller_id=current_user.user_id))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_user(
    id: int,
    handler: FromDishka[DeleteUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    deleted = await handler.execute(DeleteUserCommand(user_id=id, caller_id=current_user.user_id))
    if not deleted:
        raise EntityNotFoundError.for_id("User", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
