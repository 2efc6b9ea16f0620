from fastapi import Request

from studio.core.config import Settings
from studio.db.store import JsonDocumentStore
from studio.db.repositories import ProjectRepository, TemplateRepository, CommitRepository


class Stores:
    """Экземпляры хранилищ процесса; создаются один раз при старте"""

    def __init__(self, projects: JsonDocumentStore, templates: JsonDocumentStore, commits: JsonDocumentStore):
        self.projects = projects
        self.templates = templates
        self.commits = commits

    @classmethod
    def from_settings(cls, settings: Settings) -> "Stores":
        return cls(
            projects=JsonDocumentStore.open(settings.data_file, name="projects"),
            templates=JsonDocumentStore.open(settings.templates_file, name="templates"),
            commits=JsonDocumentStore.open(settings.git_data_file, name="commits", stamp_modified=False)
        )


# Функции для dependency injection в FastAPI
def get_stores(request: Request) -> Stores:
    return request.app.state.stores


def get_project_repository(request: Request) -> ProjectRepository:
    return ProjectRepository(get_stores(request).projects)


def get_template_repository(request: Request) -> TemplateRepository:
    return TemplateRepository(get_stores(request).templates)


def get_commit_repository(request: Request) -> CommitRepository:
    return CommitRepository(get_stores(request).commits)
