"""Label API Router. Labels are global: any authenticated user sees and edits all of them."""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status

from flowing_links.application.commands.labels import (
    DeleteLabelCommand,
    DeleteLabelHandler,
    SaveLabelCommand,
    SaveLabelHandler,
)
from flowing_links.application.dto.label import LabelDTO
from flowing_links.application.queries.labels import (
    GetLabelHandler,
    GetLabelQuery,
    ListLabelsHandler,
    ListLabelsQuery,
)
from flowing_links.domain.exceptions import EntityNotFoundError
from flowing_links.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/Label", tags=["labels"])


@router.get("", response_model=list[LabelDTO])
@inject
async def list_labels(
    handler: FromDishka[ListLabelsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(ListLabelsQuery())


@router.get("/{id}", response_model=LabelDTO)
@inject
async def get_label(
    id: int,
    handler: FromDishka[GetLabelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    label = await handler.execute(GetLabelQuery(label_id=id))
    if label is None:
        raise EntityNotFoundError.for_id("Label", id)
    return label


@router.post("", response_model=LabelDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_label(
    request: LabelDTO,
    handler: FromDishka[SaveLabelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(SaveLabelCommand(label=request.model_copy(update={"id": 0})))


@router.put("/{id}", response_model=LabelDTO)
@inject
async def update_label(
    id: int,
    request: LabelDTO,
    handler: FromDishka[SaveLabelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(SaveLabelCommand(label=request.model_copy(update={"id": id})))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_label(
    id: int,
    handler: FromDishka[DeleteLabelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    if not await handler.execute(DeleteLabelCommand(label_id=id)):
        raise EntityNotFoundError.for_id("Label", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
