"""Field tables for every entity/DTO pair exposed by the API."""

from flowing_links.application.dto.label import LabelDTO
from flowing_links.application.dto.link import LinkDTO
from flowing_links.application.dto.project import ProjectDTO
from flowing_links.application.dto.user import UserDTO
from flowing_links.application.mapping.entity_map import EntityMap, Reference
from flowing_links.domain.entities import Label, Link, Project, User

# password_hash never crosses the API boundary.
USER_MAP: EntityMap[User, UserDTO] = EntityMap(
    entity_type=User,
    dto_type=UserDTO,
    fields=("id", "name", "username"),
)

PROJECT_MAP: EntityMap[Project, ProjectDTO] = EntityMap(
    entity_type=Project,
    dto_type=ProjectDTO,
    fields=("id", "name"),
    references={"user_id": Reference("user", User)},
)

LABEL_MAP: EntityMap[Label, LabelDTO] = EntityMap(
    entity_type=Label,
    dto_type=LabelDTO,
    fields=("id", "name"),
)

LINK_MAP: EntityMap[Link, LinkDTO] = EntityMap(
    entity_type=Link,
    dto_type=LinkDTO,
    fields=("id", "description", "url", "comments", "read", "favorite"),
    references={"user_id": Reference("user", User)},
    collections={"label_ids": Reference("labels", Label)},
)
