from .list_users import ListUsersQuery, ListUsersHandler
from .get_user import GetUserQuery, GetUserHandler
from .username_exists import UsernameExistsQuery, UsernameExistsHandler

__all__ = [
    "ListUsersQuery",
    "ListUsersHandler",
    "GetUserQuery",
    "GetUserHandler",
    "UsernameExistsQuery",
    "UsernameExistsHandler",
]
