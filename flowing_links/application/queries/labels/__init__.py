from .list_labels import ListLabelsQuery, ListLabelsHandler
from .get_label import GetLabelQuery, GetLabelHandler

__all__ = [
    "ListLabelsQuery",
    "ListLabelsHandler",
    "GetLabelQuery",
    "GetLabelHandler",
]
