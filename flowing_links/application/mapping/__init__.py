"""Entity <-> DTO mapping tables."""

from flowing_links.application.mapping.entity_map import EntityMap, Reference
from flowing_links.application.mapping.maps import (
    USER_MAP,
    PROJECT_MAP,
    LABEL_MAP,
    LINK_MAP,
)

__all__ = [
    "EntityMap",
    "Reference",
    "USER_MAP",
    "PROJECT_MAP",
    "LABEL_MAP",
    "LINK_MAP",
]
