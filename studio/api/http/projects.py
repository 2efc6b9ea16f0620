from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Dict, Any

from studio.core.db import get_project_repository
from studio.core.errors import NotFoundError, StorageError
from studio.db.repositories.project_repository import ProjectRepository
from studio.domains.projects.schemas import ProjectMetadata, ProjectSaveRequest
from studio.domains.projects.services import ProjectService

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[ProjectMetadata])
async def list_projects(repository: ProjectRepository = Depends(get_project_repository)):
    """Список проектов, последние изменённые первыми"""
    project_service = ProjectService(repository)
    return await project_service.list_projects()


@router.post("", response_model=ProjectMetadata)
async def save_project(
    project_data: ProjectSaveRequest,
    repository: ProjectRepository = Depends(get_project_repository)
):
    """Создание или обновление проекта"""
    project_service = ProjectService(repository)

    try:
        return await project_service.save_project(project_data)
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    repository: ProjectRepository = Depends(get_project_repository)
) -> Dict[str, Any]:
    """Получение проекта по id"""
    project_service = ProjectService(repository)

    try:
        return await project_service.get_project(project_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    repository: ProjectRepository = Depends(get_project_repository)
):
    """Удаление проекта"""
    project_service = ProjectService(repository)

    try:
        await project_service.delete_project(project_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )
