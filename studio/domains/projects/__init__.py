from studio.domains.projects.schemas import Project, ProjectMetadata, ProjectSaveRequest
from studio.domains.projects.services import ProjectService

__all__ = [
    "Project", "ProjectMetadata", "ProjectSaveRequest",
    "ProjectService"
]
