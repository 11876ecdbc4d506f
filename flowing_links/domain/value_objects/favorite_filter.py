"""
FavoriteFilter Value Object - Three-way favorite filter used by link search.
"""

from enum import IntEnum


class FavoriteFilter(IntEnum):
    ALL = 0
    FAVORITES_ONLY = 1
    NON_FAVORITES_ONLY = 2
