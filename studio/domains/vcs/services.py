import logging
from typing import List, TYPE_CHECKING

from studio.core.errors import NotFoundError
from studio.domains.vcs.entities import Commit
from studio.domains.vcs.schemas import CommitCreate

if TYPE_CHECKING:
    from studio.db.repositories.commit_repository import CommitRepository

logger = logging.getLogger(__name__)


class CommitLogService:
    """Серверный журнал коммитов проектов"""

    def __init__(self, repository: "CommitRepository"):
        self.repository = repository

    async def append_commit(self, project_id: str, commit_data: CommitCreate) -> Commit:
        """Добавление коммита; при ошибке записи коммит не сохраняется"""
        commit = await self.repository.append(
            project_id,
            message=commit_data.message,
            snapshot=commit_data.snapshot,
            timestamp=commit_data.timestamp
        )
        logger.info(f"Commit {commit.id} appended to project {project_id}")
        return commit

    async def list_commits(self, project_id: str) -> List[Commit]:
        """Коммиты в порядке добавления; порядок «новые первыми» задаёт клиент"""
        return await self.repository.list(project_id)

    async def clear_commits(self, project_id: str) -> None:
        await self.repository.clear(project_id)
        logger.info(f"Commit history of project {project_id} cleared")

    async def get_head(self, project_id: str) -> Commit:
        """Коммит HEAD проекта; NotFoundError если истории нет"""
        head = await self.repository.get_head(project_id)
        if head is None:
            raise NotFoundError(f"Project '{project_id}' has no commits")
        return head
