import logging
from typing import List, Dict, Any

from studio.db.repositories.project_repository import ProjectRepository
from studio.domains.projects.schemas import ProjectMetadata, ProjectSaveRequest

logger = logging.getLogger(__name__)


class ProjectService:
    """Сервис для работы с проектами"""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def list_projects(self) -> List[ProjectMetadata]:
        """Список проектов, последние изменённые первыми"""
        documents = await self.repository.list()
        return [ProjectMetadata.from_document(doc) for doc in documents]

    async def get_project(self, project_id: str) -> Dict[str, Any]:
        return await self.repository.get(project_id)

    async def save_project(self, request: ProjectSaveRequest) -> ProjectMetadata:
        """Создание или перезапись проекта"""
        document = request.model_dump(exclude={"id"})
        saved = await self.repository.save(request.id, document)
        logger.info(f"Project {saved['id']} saved")
        return ProjectMetadata.from_document(saved)

    async def delete_project(self, project_id: str) -> None:
        await self.repository.delete(project_id)
        logger.info(f"Project {project_id} deleted")
