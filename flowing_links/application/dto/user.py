"""User DTOs for API request/response."""

from flowing_links.application.dto.base import CamelModel


class UserDTO(CamelModel):
    """User as exposed over the API. The password hash never leaves the service."""

    id: int = 0
    name: str = ""
    username: str = ""
