"""Business rules of the command handlers, exercised against mocked ports."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from flowing_links.application.commands.links import (
    SaveLinkCommand,
    SaveLinkHandler,
    ToggleFavoriteCommand,
    ToggleFavoriteHandler,
)
from flowing_links.application.commands.projects import SaveProjectCommand, SaveProjectHandler
from flowing_links.application.commands.users import (
    DeleteUserCommand,
    DeleteUserHandler,
    SaveUserCommand,
    SaveUserHandler,
)
from flowing_links.application.dto import LinkDTO, ProjectDTO, UserDTO
from flowing_links.config.settings import AccountSettings
from flowing_links.domain.entities import Link, User
from flowing_links.domain.exceptions import (
    AccessDeniedError,
    DomainError,
    EntityNotFoundError,
)
from flowing_links.domain.ports import PasswordHasher, UnitOfWork
from flowing_links.domain.ports.repositories import (
    LabelRepository,
    LinkRepository,
    ProjectRepository,
    UserRepository,
)


@pytest.fixture()
def unit_of_work():
    return AsyncMock(spec=UnitOfWork)


@pytest.fixture()
def user_repository():
    repository = AsyncMock(spec=UserRepository)
    repository.get_by_id.side_effect = lambda user_id: User(id=user_id, username=f"u{user_id}")
    repository.username_taken.return_value = False
    return repository


# ==================== USERS ====================


@pytest.mark.parametrize("caller_id", [1, 2])
async def test_admin_user_can_never_be_deleted(user_repository, unit_of_work, caller_id):
    handler = DeleteUserHandler(user_repository, unit_of_work)
    with pytest.raises(DomainError, match="The admin user can't be deleted."):
        await handler.execute(DeleteUserCommand(user_id=1, caller_id=caller_id))
    user_repository.delete.assert_not_awaited()


async def test_only_admin_deletes_users(user_repository, unit_of_work):
    handler = DeleteUserHandler(user_repository, unit_of_work)
    with pytest.raises(AccessDeniedError, match="Only the Admin can delete users."):
        await handler.execute(DeleteUserCommand(user_id=3, caller_id=2))


async def test_user_cannot_delete_themselves(user_repository, unit_of_work):
    handler = DeleteUserHandler(user_repository, unit_of_work)
    with pytest.raises(AccessDeniedError, match="You cannot delete your own account."):
        await handler.execute(DeleteUserCommand(user_id=2, caller_id=2))


async def test_delete_missing_user_returns_false_without_commit(user_repository, unit_of_work):
    user_repository.delete.return_value = False
    handler = DeleteUserHandler(user_repository, unit_of_work)
    assert await handler.execute(DeleteUserCommand(user_id=99, caller_id=1)) is False
    unit_of_work.commit.assert_not_awaited()


async def test_new_user_gets_hashed_default_password(user_repository, unit_of_work):
    hasher = MagicMock(spec=PasswordHasher)
    hasher.hash.return_value = "hashed-default"
    user_repository.add.side_effect = lambda user: User(
        id=5, name=user.name, username=user.username, password_hash=user.password_hash
    )
    handler = SaveUserHandler(
        user_repository, hasher, unit_of_work, AccountSettings(default_user_password="123456")
    )

    dto = await handler.execute(SaveUserCommand(user=UserDTO(name="N", username="n"), caller_id=1))

    hasher.hash.assert_called_once_with("123456")
    added = user_repository.add.await_args.args[0]
    assert added.password_hash == "hashed-default"
    assert dto == UserDTO(id=5, name="N", username="n")
    unit_of_work.commit.assert_awaited_once()


async def test_non_admin_cannot_create_users(user_repository, unit_of_work):
    handler = SaveUserHandler(
        user_repository, MagicMock(spec=PasswordHasher), unit_of_work, AccountSettings()
    )
    with pytest.raises(AccessDeniedError, match="Only the Admin can create users."):
        await handler.execute(SaveUserCommand(user=UserDTO(username="x"), caller_id=2))


async def test_duplicate_username_rejected(user_repository, unit_of_work):
    user_repository.username_taken.return_value = True
    handler = SaveUserHandler(
        user_repository, MagicMock(spec=PasswordHasher), unit_of_work, AccountSettings()
    )
    with pytest.raises(DomainError, match="Username 'taken' already exists."):
        await handler.execute(SaveUserCommand(user=UserDTO(username="taken"), caller_id=1))


# ==================== PROJECTS ====================


async def test_duplicate_project_name_for_same_user_rejected(user_repository, unit_of_work):
    project_repository = AsyncMock(spec=ProjectRepository)
    project_repository.name_taken.return_value = True
    handler = SaveProjectHandler(project_repository, user_repository, unit_of_work)

    with pytest.raises(DomainError, match="Project 'Reading' already exists for this user."):
        await handler.execute(SaveProjectCommand(project=ProjectDTO(name="Reading"), owner_id=2))
    project_repository.name_taken.assert_awaited_once_with("Reading", 2)


async def test_update_of_missing_project_is_not_found(user_repository, unit_of_work):
    project_repository = AsyncMock(spec=ProjectRepository)
    project_repository.get_by_id.return_value = None
    handler = SaveProjectHandler(project_repository, user_repository, unit_of_work)

    with pytest.raises(EntityNotFoundError, match="Project with ID 8 not found."):
        await handler.execute(
            SaveProjectCommand(project=ProjectDTO(id=8, name="Reading"), owner_id=2)
        )


# ==================== LINKS ====================


@pytest.fixture()
def link_repository():
    repository = AsyncMock(spec=LinkRepository)
    repository.url_taken.return_value = False

    async def add(link: Link) -> Link:
        link.id = 10
        return link

    repository.add.side_effect = add
    return repository


@pytest.fixture()
def label_repository():
    repository = AsyncMock(spec=LabelRepository)
    repository.missing_ids.return_value = []
    return repository


async def test_save_link_replaces_labels_with_distinct_ids(
    link_repository, label_repository, user_repository, unit_of_work
):
    handler = SaveLinkHandler(link_repository, label_repository, user_repository, unit_of_work)
    dto = LinkDTO(description="d", url="https://x", label_ids=[2, 3, 2])

    result = await handler.execute(SaveLinkCommand(link=dto, owner_id=4))

    link_repository.replace_labels.assert_awaited_once_with(10, [2, 3])
    assert result.id == 10
    assert result.user_id == 4
    assert result.label_ids == [2, 3]
    unit_of_work.commit.assert_awaited_once()


async def test_save_link_rejects_unknown_label(
    link_repository, label_repository, user_repository, unit_of_work
):
    label_repository.missing_ids.return_value = [7]
    handler = SaveLinkHandler(link_repository, label_repository, user_repository, unit_of_work)

    with pytest.raises(DomainError, match="Label with ID 7 not found."):
        await handler.execute(
            SaveLinkCommand(link=LinkDTO(url="https://x", label_ids=[7]), owner_id=4)
        )
    link_repository.add.assert_not_awaited()
    unit_of_work.commit.assert_not_awaited()


async def test_save_link_rejects_duplicate_url_for_owner(
    link_repository, label_repository, user_repository, unit_of_work
):
    link_repository.url_taken.return_value = True
    handler = SaveLinkHandler(link_repository, label_repository, user_repository, unit_of_work)

    with pytest.raises(DomainError, match="Link with URL 'https://x' already exists."):
        await handler.execute(SaveLinkCommand(link=LinkDTO(url="https://x"), owner_id=4))


async def test_save_link_requires_existing_owner(
    link_repository, label_repository, user_repository, unit_of_work
):
    user_repository.get_by_id.side_effect = None
    user_repository.get_by_id.return_value = None
    handler = SaveLinkHandler(link_repository, label_repository, user_repository, unit_of_work)

    with pytest.raises(DomainError, match="User with ID 4 not found."):
        await handler.execute(SaveLinkCommand(link=LinkDTO(url="https://x"), owner_id=4))


async def test_toggle_favorite_on_foreign_link_does_not_commit(link_repository, unit_of_work):
    link_repository.set_favorite.return_value = False
    handler = ToggleFavoriteHandler(link_repository, unit_of_work)

    found = await handler.execute(ToggleFavoriteCommand(link_id=3, owner_id=2, favorite=True))

    assert found is False
    unit_of_work.commit.assert_not_awaited()
