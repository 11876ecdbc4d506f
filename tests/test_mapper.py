import pytest

from flowing_links.application.dto import LinkDTO, ProjectDTO, UserDTO
from flowing_links.application.mapping import LINK_MAP, PROJECT_MAP, USER_MAP
from flowing_links.domain.entities import Label, Link, Project, User


def test_user_to_dto_never_exposes_password_hash():
    user = User(id=3, name="Ann", username="ann", password_hash="secret-hash")
    dto = USER_MAP.to_dto(user)
    assert dto == UserDTO(id=3, name="Ann", username="ann")
    assert "secret-hash" not in dto.model_dump_json()


def test_reference_id_becomes_placeholder_entity():
    project = PROJECT_MAP.to_entity(ProjectDTO(id=0, name="Reading", user_id=5))
    assert project.user == User(id=5)
    assert project.user_id == 5


def test_zero_reference_id_is_skipped():
    project = PROJECT_MAP.to_entity(ProjectDTO(id=0, name="Reading", user_id=0))
    assert project.user is None


def test_zero_reference_id_leaves_target_relation_untouched():
    existing = Project(id=9, name="Old", user=User(id=2))
    PROJECT_MAP.to_entity(ProjectDTO(id=9, name="New", user_id=0), existing)
    assert existing.name == "New"
    assert existing.user_id == 2


def test_link_collection_maps_to_label_placeholders():
    dto = LinkDTO(description="d", url="https://a", user_id=2, label_ids=[1, 0, 4])
    link = LINK_MAP.to_entity(dto)
    assert link.labels == [Label(id=1), Label(id=4)]
    assert link.user_id == 2


def test_link_to_dto_flattens_relations():
    link = Link(
        id=3,
        description="Docs",
        url="https://docs.python.org",
        favorite=True,
        user=User(id=2, name="Bob"),
        labels=[Label(id=1, name="python"), Label(id=4, name="docs")],
    )
    dto = LINK_MAP.to_dto(link)
    assert dto.user_id == 2
    assert dto.label_ids == [1, 4]
    assert dto.favorite is True


@pytest.mark.parametrize("user_id", [0, 7])
def test_dto_entity_dto_is_idempotent(user_id):
    dto = LinkDTO(
        id=11,
        description="d",
        url="https://x",
        comments="c",
        read=True,
        user_id=user_id,
        label_ids=[2, 3],
    )
    assert LINK_MAP.to_dto(LINK_MAP.to_entity(dto)) == dto


def test_dto_wire_format_is_camel_case():
    dto = LinkDTO.model_validate({"url": "https://x", "userId": 4, "labelIds": [1]})
    assert dto.user_id == 4
    assert dto.label_ids == [1]
    assert "labelIds" in dto.model_dump(by_alias=True)
