from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from studio.core.db import get_commit_repository
from studio.core.errors import NotFoundError, StorageError, SerializationError
from studio.db.repositories.commit_repository import CommitRepository
from studio.domains.vcs.schemas import CommitCreate, CommitResponse
from studio.domains.vcs.services import CommitLogService

router = APIRouter(prefix="/api/projects", tags=["commits"])


@router.get("/{project_id}/commits", response_model=List[CommitResponse])
async def list_commits(
    project_id: str,
    repository: CommitRepository = Depends(get_commit_repository)
):
    """Коммиты проекта в порядке добавления (старые первыми)"""
    commit_service = CommitLogService(repository)

    try:
        commits = await commit_service.list_commits(project_id)
    except SerializationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )

    return [CommitResponse.model_validate(commit) for commit in commits]


@router.get("/{project_id}/commits/head", response_model=CommitResponse)
async def get_head_commit(
    project_id: str,
    repository: CommitRepository = Depends(get_commit_repository)
):
    """Коммит, на который указывает HEAD"""
    commit_service = CommitLogService(repository)

    try:
        commit = await commit_service.get_head(project_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No commits found for project"
        )
    except SerializationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )

    return CommitResponse.model_validate(commit)


@router.post("/{project_id}/commits", response_model=CommitResponse)
async def append_commit(
    project_id: str,
    commit_data: CommitCreate,
    repository: CommitRepository = Depends(get_commit_repository)
):
    """Добавление коммита в журнал проекта"""
    commit_service = CommitLogService(repository)

    try:
        commit = await commit_service.append_commit(project_id, commit_data)
    except (StorageError, SerializationError) as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )

    return CommitResponse.model_validate(commit)


@router.delete("/{project_id}/commits", status_code=status.HTTP_204_NO_CONTENT)
async def clear_commits(
    project_id: str,
    repository: CommitRepository = Depends(get_commit_repository)
):
    """Удаление всей истории коммитов проекта"""
    commit_service = CommitLogService(repository)

    try:
        await commit_service.clear_commits(project_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No commits found for project"
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.user_message()
        )
