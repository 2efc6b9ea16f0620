from typing import List, Dict, Any

from studio.db.store import JsonDocumentStore


class TemplateRepository:
    """Репозиторий шаблонов компонентов"""

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    async def list(self) -> List[Dict[str, Any]]:
        return await self.store.list()

    async def get(self, template_id: str) -> Dict[str, Any]:
        return await self.store.get(template_id)

    async def save(self, template: Dict[str, Any]) -> Dict[str, Any]:
        """Сохранение шаблона; пустой id означает новый шаблон"""
        return await self.store.put(template.get("id"), template)

    async def delete(self, template_id: str) -> None:
        await self.store.delete(template_id)
