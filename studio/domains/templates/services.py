import logging
from typing import List

from studio.db.repositories.template_repository import TemplateRepository
from studio.domains.templates.schemas import Template

logger = logging.getLogger(__name__)


class TemplateService:
    """Сервис для работы с шаблонами"""

    def __init__(self, repository: TemplateRepository):
        self.repository = repository

    async def list_templates(self) -> List[Template]:
        """Шаблоны, отсортированные по имени"""
        documents = await self.repository.list()
        templates = [Template.model_validate(doc) for doc in documents]
        templates.sort(key=lambda t: t.name)
        return templates

    async def get_template(self, template_id: str) -> Template:
        return Template.model_validate(await self.repository.get(template_id))

    async def save_template(self, template: Template) -> Template:
        saved = await self.repository.save(template.model_dump(exclude={"last_modified"}))
        logger.info(f"Template {saved['id']} saved")
        return Template.model_validate(saved)

    async def delete_template(self, template_id: str) -> None:
        await self.repository.delete(template_id)
        logger.info(f"Template {template_id} deleted")
