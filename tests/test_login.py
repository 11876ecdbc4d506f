from unittest.mock import AsyncMock, MagicMock

import pytest

from flowing_links.application.queries.auth import AuthenticateHandler, AuthenticateQuery
from flowing_links.domain.entities import User
from flowing_links.domain.exceptions import DomainError
from flowing_links.domain.ports import PasswordHasher
from flowing_links.domain.ports.repositories import UserRepository


@pytest.fixture()
def user_repository():
    repository = AsyncMock(spec=UserRepository)
    repository.get_by_username.return_value = User(
        id=1, name="Administrator", username="admin", password_hash="hashed"
    )
    return repository


@pytest.fixture()
def password_hasher():
    hasher = MagicMock(spec=PasswordHasher)
    hasher.verify.side_effect = lambda password, password_hash: password == "admin"
    return hasher


@pytest.fixture()
def handler(user_repository, password_hasher):
    return AuthenticateHandler(user_repository, password_hasher)


async def test_valid_credentials_return_user(handler, user_repository):
    user = await handler.execute(AuthenticateQuery(username="admin", password="admin"))
    assert user.id == 1
    user_repository.get_by_username.assert_awaited_once_with("admin")


async def test_username_is_trimmed_before_lookup(handler, user_repository):
    await handler.execute(AuthenticateQuery(username="  admin ", password="admin"))
    user_repository.get_by_username.assert_awaited_once_with("admin")


@pytest.mark.parametrize("username", ["", "   "])
async def test_blank_username_fails_before_lookup(handler, user_repository, username):
    with pytest.raises(DomainError, match="Username cannot be empty"):
        await handler.execute(AuthenticateQuery(username=username, password="admin"))
    user_repository.get_by_username.assert_not_awaited()


@pytest.mark.parametrize("password", ["", "  "])
async def test_blank_password_fails_before_lookup(handler, user_repository, password):
    with pytest.raises(DomainError, match="Password cannot be empty"):
        await handler.execute(AuthenticateQuery(username="admin", password=password))
    user_repository.get_by_username.assert_not_awaited()


async def test_unknown_user_and_wrong_password_share_message(handler, user_repository):
    with pytest.raises(DomainError) as wrong_password:
        await handler.execute(AuthenticateQuery(username="admin", password="nope"))

    user_repository.get_by_username.return_value = None
    with pytest.raises(DomainError) as unknown_user:
        await handler.execute(AuthenticateQuery(username="ghost", password="admin"))

    assert wrong_password.value.message == "Invalid username or password"
    assert unknown_user.value.message == wrong_password.value.message
