"""
Links API Router - the caller's bookmarks.

Every endpoint is owner-scoped: another user's link behaves exactly like a
missing one.

Search body:
{
    "description": "python",   # optional, case-insensitive substring
    "labelIds": [1, 4],        # optional, any-of
    "favorite": 0              # 0 all, 1 favorites only, 2 non-favorites only
}
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, Depends, Response, status

from flowing_links.application.commands.links import (
    DeleteLinkCommand,
    DeleteLinkHandler,
    SaveLinkCommand,
    SaveLinkHandler,
    ToggleFavoriteCommand,
    ToggleFavoriteHandler,
)
from flowing_links.application.dto.link import LinkDTO, LinkFilterDTO
from flowing_links.application.queries.links import (
    GetLinkHandler,
    GetLinkQuery,
    LinkExistsHandler,
    LinkExistsQuery,
    ListLinksHandler,
    ListLinksQuery,
    SearchLinksHandler,
    SearchLinksQuery,
)
from flowing_links.domain.exceptions import EntityNotFoundError
from flowing_links.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/Link", tags=["links"])


@router.get("", response_model=list[LinkDTO])
@inject
async def list_links(
    handler: FromDishka[ListLinksHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(ListLinksQuery(owner_id=current_user.user_id))


@router.post("/search", response_model=list[LinkDTO])
@inject
async def search_links(
    request: LinkFilterDTO,
    handler: FromDishka[SearchLinksHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    query = SearchLinksQuery(owner_id=current_user.user_id, link_filter=request.to_filter())
    return await handler.execute(query)


@router.get("/exists/{id}", response_model=bool)
@inject
async def link_exists(
    id: int,
    handler: FromDishka[LinkExistsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(LinkExistsQuery(link_id=id, owner_id=current_user.user_id))


@router.get("/{id}", response_model=LinkDTO)
@inject
async def get_link(
    id: int,
    handler: FromDishka[GetLinkHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    link = await handler.execute(GetLinkQuery(link_id=id, owner_id=current_user.user_id))
    if link is None:
        raise EntityNotFoundError.for_id("Link", id)
    return link


@router.post("", response_model=LinkDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_link(
    request: LinkDTO,
    handler: FromDishka[SaveLinkHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    dto = request.model_copy(update={"id": 0})
    return await handler.execute(SaveLinkCommand(link=dto, owner_id=current_user.user_id))


@router.put("/{id}", response_model=LinkDTO)
@inject
async def update_link(
    id: int,
    request: LinkDTO,
    handler: FromDishka[SaveLinkHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    dto = request.model_copy(update={"id": id})
    return await handler.execute(SaveLinkCommand(link=dto, owner_id=current_user.user_id))


@router.patch("/{id}/favorite", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def toggle_favorite(
    id: int,
    handler: FromDishka[ToggleFavoriteHandler],
    favorite: bool = Body(...),
    current_user: AuthUser = Depends(get_current_user),
):
    """Body is a bare JSON boolean: true or false."""
    found = await handler.execute(
        ToggleFavoriteCommand(link_id=id, owner_id=current_user.user_id, favorite=favorite)
    )
    if not found:
        raise EntityNotFoundError.for_id("Link", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_link(
    id: int,
    handler: FromDishka[DeleteLinkHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    deleted = await handler.execute(DeleteLinkCommand(link_id=id, owner_id=current_user.user_id))
    if not deleted:
        raise EntityNotFoundError.for_id("Link", id)
    logger.debug("Link %s deleted by user %s", id, current_user.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
