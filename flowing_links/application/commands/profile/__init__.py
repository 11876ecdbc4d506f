"""Profile commands: the caller editing their own account."""

from .update_profile import UpdateProfileCommand, UpdateProfileHandler
from .change_password import ChangePasswordCommand, ChangePasswordHandler

__all__ = [
    "UpdateProfileCommand",
    "UpdateProfileHandler",
    "ChangePasswordCommand",
    "ChangePasswordHandler",
]
