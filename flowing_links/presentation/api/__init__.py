"""
API Routers - FastAPI endpoint definitions.
"""

from flowing_links.presentation.api.auth import router as auth_router
from flowing_links.presentation.api.users import router as users_router
from flowing_links.presentation.api.projects import router as projects_router
from flowing_links.presentation.api.labels import router as labels_router
from flowing_links.presentation.api.links import router as links_router
from flowing_links.presentation.api.profile import router as profile_router
from flowing_links.presentation.api.health import router as health_router

__all__ = [
    "auth_router",
    "users_router",
    "projects_router",
    "labels_router",
    "links_router",
    "profile_router",
    "health_router",
]
