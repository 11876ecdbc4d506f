"""Link commands."""

from .save_link import SaveLinkCommand, SaveLinkHandler
from .delete_link import DeleteLinkCommand, DeleteLinkHandler
from .toggle_favorite import ToggleFavoriteCommand, ToggleFavoriteHandler

__all__ = [
    "SaveLinkCommand",
    "SaveLinkHandler",
    "DeleteLinkCommand",
    "DeleteLinkHandler",
    "ToggleFavoriteCommand",
    "ToggleFavoriteHandler",
]
