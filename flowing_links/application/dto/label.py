"""Label DTOs for API request/response."""

from flowing_links.application.dto.base import CamelModel


class LabelDTO(CamelModel):
    id: int = 0
    name: str = ""
