from studio.db.repositories.project_repository import ProjectRepository
from studio.db.repositories.template_repository import TemplateRepository
from studio.db.repositories.commit_repository import CommitRepository

__all__ = [
    "ProjectRepository",
    "TemplateRepository",
    "CommitRepository"
]
