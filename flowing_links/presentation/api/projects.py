"""Project API Router. Every endpoint is scoped to the caller's projects."""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status

from flowing_links.application.commands.projects import (
    DeleteProjectCommand,
    DeleteProjectHandler,
    SaveProjectCommand,
    SaveProjectHandler,
)
from flowing_links.application.dto.project import ProjectDTO
from flowing_links.application.queries.projects import (
    GetProjectHandler,
    GetProjectQuery,
    ListProjectsHandler,
    ListProjectsQuery,
    ProjectExistsHandler,
    ProjectExistsQuery,
    ProjectNameExistsHandler,
    ProjectNameExistsQuery,
)
from flowing_links.domain.exceptions import EntityNotFoundError
from flowing_links.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/Project", tags=["projects"])


@router.get("", response_model=list[ProjectDTO])
@inject
async def list_projects(
    handler: FromDishka[ListProjectsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(ListProjectsQuery(owner_id=current_user.user_id))


@router.get("/exists/{id}", response_model=bool)
@inject
async def project_exists(
    id: int,
    handler: FromDishka[ProjectExistsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(ProjectExistsQuery(project_id=id, owner_id=current_user.user_id))


@router.get("/check-name/{name}", response_model=bool)
@inject
async def check_project_name(
    name: str,
    handler: FromDishka[ProjectNameExistsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(
        ProjectNameExistsQuery(name=name, owner_id=current_user.user_id)
    )


@router.get("/{id}", response_model=ProjectDTO)
@inject
async def get_project(
    id: int,
    handler: FromDishka[GetProjectHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    project = await handler.execute(GetProjectQuery(project_id=id, owner_id=current_user.user_id))
    if project is None:
        raise EntityNotFoundError.for_id("Project", id)
    return project


@router.post("", response_model=ProjectDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_project(
    request: ProjectDTO,
    handler: FromDishka[SaveProjectHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    dto = request.model_copy(update={"id": 0})
    return await handler.execute(SaveProjectCommand(project=dto, owner_id=current_user.user_id))


@router.put("/{id}", response_model=ProjectDTO)
@inject
async def update_project(
    id: int,
    request: ProjectDTO,
    handler: FromDishka[SaveProjectHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    dto = request.model_copy(update={"id": id})
    return await handler.execute(SaveProjectCommand(project=dto, owner_id=current_user.user_id))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_project(
    id: int,
    handler: FromDishka[DeleteProjectHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    deleted = await handler.execute(
        DeleteProjectCommand(project_id=id, owner_id=current_user.user_id)
    )
    if not deleted:
        raise EntityNotFoundError.for_id("Project", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
