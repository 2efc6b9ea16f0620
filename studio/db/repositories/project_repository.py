from typing import Optional, List, Dict, Any

from studio.db.store import JsonDocumentStore


class ProjectRepository:
    """Репозиторий для работы с проектами"""

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    async def list(self) -> List[Dict[str, Any]]:
        """Все проекты, отсортированные по last_modified (новые первыми)"""
        return await self.store.list()

    async def get(self, project_id: str) -> Dict[str, Any]:
        """Получение проекта по id; NotFoundError если его нет"""
        return await self.store.get(project_id)

    async def save(self, project_id: Optional[str], document: Dict[str, Any]) -> Dict[str, Any]:
        """Сохранение проекта; без id создаётся новый"""
        return await self.store.put(project_id, document)

    async def delete(self, project_id: str) -> None:
        await self.store.delete(project_id)
