"""Project commands."""

from .save_project import SaveProjectCommand, SaveProjectHandler
from .delete_project import DeleteProjectCommand, DeleteProjectHandler

__all__ = [
    "SaveProjectCommand",
    "SaveProjectHandler",
    "DeleteProjectCommand",
    "DeleteProjectHandler",
]
