"""
Entity <-> DTO mapping driven by explicit field tables.

Each EntityMap declares, for one entity/DTO pair:
- fields:      scalar attributes copied under the same name in both directions
- references:  DTO "<name>_id" <-> entity relationship "<name>"
- collections: DTO "<name>_ids" <-> entity list of related entities

Entity -> DTO copies only the ids of related entities.
DTO -> entity builds placeholder entities that carry only the id; an id of 0/None
means "no relation" and is skipped, leaving the target attribute untouched.

Anything not listed in the table is ignored. Mapping never touches storage.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

E = TypeVar("E")
D = TypeVar("D")


@dataclass(frozen=True)
class Reference:
    """Entity attribute holding a related entity, and how to build its placeholder."""

    attribute: str
    placeholder: Callable[..., Any]

    def build(self, related_id: int) -> Any:
        return self.placeholder(id=related_id)


@dataclass(frozen=True)
class EntityMap(Generic[E, D]):
    entity_type: Callable[[], E]
    dto_type: Callable[..., D]
    fields: tuple[str, ...]
    references: Mapping[str, Reference] = field(default_factory=dict)
    collections: Mapping[str, Reference] = field(default_factory=dict)

    def to_dto(self, entity: E) -> D:
        values: dict[str, Any] = {name: getattr(entity, name) for name in self.fields}

        for dto_field, reference in self.references.items():
            related = getattr(entity, reference.attribute)
            if related is not None:
                values[dto_field] = related.id

        for dto_field, reference in self.collections.items():
            related_items = getattr(entity, reference.attribute) or []
            values[dto_field] = [item.id for item in related_items if item.id]

        return self.dto_type(**values)

    def to_entity(self, dto: D, target: Optional[E] = None) -> E:
        entity = target if target is not None else self.entity_type()

        for name in self.fields:
            setattr(entity, name, getattr(dto, name))

        for dto_field, reference in self.references.items():
            related_id = getattr(dto, dto_field)
            if not related_id:
                continue
            setattr(entity, reference.attribute, reference.build(related_id))

        for dto_field, reference in self.collections.items():
            related_ids = getattr(dto, dto_field) or []
            setattr(
                entity,
                reference.attribute,
                [reference.build(related_id) for related_id in related_ids if related_id],
            )

        return entity
