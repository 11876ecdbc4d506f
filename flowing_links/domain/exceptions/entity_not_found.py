"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""

from flowing_links.domain.exceptions.domain_error import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)

    @classmethod
    def for_id(cls, entity_name: str, entity_id: int) -> "EntityNotFoundError":
        return cls(f"{entity_name} with ID {entity_id} not found.")
