"""Label commands."""

from .save_label import SaveLabelCommand, SaveLabelHandler
from .delete_label import DeleteLabelCommand, DeleteLabelHandler

__all__ = [
    "SaveLabelCommand",
    "SaveLabelHandler",
    "DeleteLabelCommand",
    "DeleteLabelHandler",
]
