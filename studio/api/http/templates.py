from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from studio.core.db import get_template_repository
from studio.core.errors import NotFoundError, StorageError
from studio.db.repositories.template_repository import TemplateRepository
from studio.domains.templates.schemas import Template
from studio.domains.templates.services import TemplateService

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=List[Template])
async def list_templates(repository: TemplateRepository = Depends(get_template_repository)):
    """Список шаблонов по имени"""
    template_service = TemplateService(repository)
    return await template_service.list_templates()


@router.post("", response_model=Template)
async def save_template(
    template: Template,
    repository: TemplateRepository = Depends(get_template_repository)
):
    """Создание или обновление шаблона"""
    template_service = TemplateService(repository)

    try:
        return await template_service.save_template(template)
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )


@router.get("/{template_id}", response_model=Template)
async def get_template(
    template_id: str,
    repository: TemplateRepository = Depends(get_template_repository)
):
    """Получение шаблона по id"""
    template_service = TemplateService(repository)

    try:
        return await template_service.get_template(template_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Template not found"
        )


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: str,
    repository: TemplateRepository = Depends(get_template_repository)
):
    """Удаление шаблона"""
    template_service = TemplateService(repository)

    try:
        await template_service.delete_template(template_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Template not found"
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )
