"""
Dishka DI Container Setup.

Registers every dependency of the service explicitly:
- configuration objects (APP scope)
- database engine, password hasher, token service (APP scope, singletons)
- AsyncSession, unit of work, repositories (REQUEST scope, one per HTTP request)
- command/query handlers (REQUEST scope)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Flow:
  Container → provides → SqlAlchemyLinkRepository → to → SaveLinkHandler
                                    ↓
                            uses LinkRepository interface

All repositories and the unit of work of one request share the same
AsyncSession, so a handler's single commit covers every write it made.
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession

from flowing_links.application.commands.labels import DeleteLabelHandler, SaveLabelHandler
from flowing_links.application.commands.links import (
    DeleteLinkHandler,
    SaveLinkHandler,
    ToggleFavoriteHandler,
)
from flowing_links.application.commands.profile import (
    ChangePasswordHandler,
    UpdateProfileHandler,
)
from flowing_links.application.commands.projects import (
    DeleteProjectHandler,
    SaveProjectHandler,
)
from flowing_links.application.commands.users import DeleteUserHandler, SaveUserHandler
from flowing_links.application.queries.auth import AuthenticateHandler
from flowing_links.application.queries.labels import GetLabelHandler, ListLabelsHandler
from flowing_links.application.queries.links import (
    GetLinkHandler,
    LinkExistsHandler,
    ListLinksHandler,
    SearchLinksHandler,
)
from flowing_links.application.queries.projects import (
    GetProjectHandler,
    ListProjectsHandler,
    ProjectExistsHandler,
    ProjectNameExistsHandler,
)
from flowing_links.application.queries.users import (
    GetUserHandler,
    ListUsersHandler,
    UsernameExistsHandler,
)
from flowing_links.config.settings import AccountSettings, Config, JwtSettings
from flowing_links.domain.ports import PasswordHasher, UnitOfWork
from flowing_links.domain.ports.repositories import (
    LabelRepository,
    LinkRepository,
    ProjectRepository,
    UserRepository,
)
from flowing_links.infrastructure.persistence import (
    Database,
    SqlAlchemyLabelRepository,
    SqlAlchemyLinkRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUserRepository,
)
from flowing_links.infrastructure.security import BcryptPasswordHasher, JwtTokenService


class AppProvider(Provider):
    """
    Application dependency provider.

    Receives the Config explicitly instead of reading globals, so tests can
    build a container against a throwaway database.
    """

    def __init__(self, config: Config):
        super().__init__()
        self._config = config

    # ==================== CONFIGURATION ====================

    @provide(scope=Scope.APP)
    def get_config(self) -> Config:
        return self._config

    @provide(scope=Scope.APP)
    def get_jwt_settings(self, config: Config) -> JwtSettings:
        return config.jwt

    @provide(scope=Scope.APP)
    def get_account_settings(self, config: Config) -> AccountSettings:
        return config.accounts

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_database(self, config: Config) -> AsyncIterable[Database]:
        """
        Provide the Database (engine + session factory).

        - Scope.APP = created ONCE, shared across all requests
        - Engine is disposed when the container closes at shutdown
        """
        database = Database(config.database)
        yield database
        await database.dispose()

    @provide(scope=Scope.REQUEST)
    async def get_session(self, database: Database) -> AsyncIterable[AsyncSession]:
        """One session per HTTP request; uncommitted work is rolled back on close."""
        async with database.session_factory() as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        return SqlAlchemyUnitOfWork(session)

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self, accounts: AccountSettings) -> PasswordHasher:
        return BcryptPasswordHasher(rounds=accounts.bcrypt_rounds)

    @provide(scope=Scope.APP)
    def get_token_service(self, jwt_settings: JwtSettings) -> JwtTokenService:
        return JwtTokenService(jwt_settings)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """
        Provide UserRepository implementation.

        - Return type is ABSTRACT (UserRepository)
        - Implementation is CONCRETE (SqlAlchemyUserRepository)
        """
        return SqlAlchemyUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, session: AsyncSession) -> ProjectRepository:
        return SqlAlchemyProjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_label_repository(self, session: AsyncSession) -> LabelRepository:
        return SqlAlchemyLabelRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_link_repository(self, session: AsyncSession) -> LinkRepository:
        return SqlAlchemyLinkRepository(session)

    # ==================== HANDLERS ====================
    # Constructor arguments are resolved by type from the providers above.

    authenticate_handler = provide(AuthenticateHandler, scope=Scope.REQUEST)

    list_users_handler = provide(ListUsersHandler, scope=Scope.REQUEST)
    get_user_handler = provide(GetUserHandler, scope=Scope.REQUEST)
    username_exists_handler = provide(UsernameExistsHandler, scope=Scope.REQUEST)
    save_user_handler = provide(SaveUserHandler, scope=Scope.REQUEST)
    delete_user_handler = provide(DeleteUserHandler, scope=Scope.REQUEST)

    list_projects_handler = provide(ListProjectsHandler, scope=Scope.REQUEST)
    get_project_handler = provide(GetProjectHandler, scope=Scope.REQUEST)
    project_exists_handler = provide(ProjectExistsHandler, scope=Scope.REQUEST)
    project_name_exists_handler = provide(ProjectNameExistsHandler, scope=Scope.REQUEST)
    save_project_handler = provide(SaveProjectHandler, scope=Scope.REQUEST)
    delete_project_handler = provide(DeleteProjectHandler, scope=Scope.REQUEST)

    list_labels_handler = provide(ListLabelsHandler, scope=Scope.REQUEST)
    get_label_handler = provide(GetLabelHandler, scope=Scope.REQUEST)
    save_label_handler = provide(SaveLabelHandler, scope=Scope.REQUEST)
    delete_label_handler = provide(DeleteLabelHandler, scope=Scope.REQUEST)

    list_links_handler = provide(ListLinksHandler, scope=Scope.REQUEST)
    get_link_handler = provide(GetLinkHandler, scope=Scope.REQUEST)
    search_links_handler = provide(SearchLinksHandler, scope=Scope.REQUEST)
    link_exists_handler = provide(LinkExistsHandler, scope=Scope.REQUEST)
    save_link_handler = provide(SaveLinkHandler, scope=Scope.REQUEST)
    delete_link_handler = provide(DeleteLinkHandler, scope=Scope.REQUEST)
    toggle_favorite_handler = provide(ToggleFavoriteHandler, scope=Scope.REQUEST)

    update_profile_handler = provide(UpdateProfileHandler, scope=Scope.REQUEST)
    change_password_handler = provide(ChangePasswordHandler, scope=Scope.REQUEST)


def create_container(config: Config) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE per app instance
    """
    return make_async_container(AppProvider(config))
