"""Authentication DTOs."""

from datetime import datetime

from flowing_links.application.dto.base import CamelModel


class LoginRequestDTO(CamelModel):
    username: str = ""
    password: str = ""


class LoginResponseDTO(CamelModel):
    name: str
    is_admin: bool
    token: str
    expires: datetime
