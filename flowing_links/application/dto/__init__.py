"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- user.py    → UserDTO
- project.py → ProjectDTO
- label.py   → LabelDTO
- link.py    → LinkDTO, LinkFilterDTO
- auth.py    → LoginRequestDTO, LoginResponseDTO

Note: These are different from domain entities.
DTOs reference related entities by id (userId, labelIds); entities hold the objects.
"""

from flowing_links.application.dto.user import UserDTO
from flowing_links.application.dto.project import ProjectDTO
from flowing_links.application.dto.label import LabelDTO
from flowing_links.application.dto.link import LinkDTO, LinkFilterDTO
from flowing_links.application.dto.auth import LoginRequestDTO, LoginResponseDTO

__all__ = [
    "UserDTO",
    "ProjectDTO",
    "LabelDTO",
    "LinkDTO",
    "LinkFilterDTO",
    "LoginRequestDTO",
    "LoginResponseDTO",
]
