"""Project DTOs for API request/response."""

from flowing_links.application.dto.base import CamelModel


class ProjectDTO(CamelModel):
    id: int = 0
    name: str = ""
    user_id: int = 0
