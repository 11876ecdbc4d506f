from .list_projects import ListProjectsQuery, ListProjectsHandler
from .get_project import GetProjectQuery, GetProjectHandler
from .project_exists import ProjectExistsQuery, ProjectExistsHandler
from .project_name_exists import ProjectNameExistsQuery, ProjectNameExistsHandler

__all__ = [
    "ListProjectsQuery",
    "ListProjectsHandler",
    "GetProjectQuery",
    "GetProjectHandler",
    "ProjectExistsQuery",
    "ProjectExistsHandler",
    "ProjectNameExistsQuery",
    "ProjectNameExistsHandler",
]
