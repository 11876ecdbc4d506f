"""User commands."""

from .save_user import SaveUserCommand, SaveUserHandler
from .delete_user import DeleteUserCommand, DeleteUserHandler

__all__ = [
    "SaveUserCommand",
    "SaveUserHandler",
    "DeleteUserCommand",
    "DeleteUserHandler",
]
