from typing import Optional, List, Any

from studio.core.errors import NotFoundError
from studio.db.store import JsonDocumentStore, now_ms
from studio.domains.vcs.entities import Commit, CommitLog


class CommitRepository:
    """Репозиторий журналов коммитов (ключ хранилища: id проекта)"""

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    async def append(
        self,
        project_id: str,
        message: str,
        snapshot: Any,
        timestamp: Optional[float] = None
    ) -> Commit:
        """Добавление коммита в конец журнала проекта"""
        commit = Commit.create_commit(
            message=message,
            snapshot=snapshot,
            timestamp=now_ms() if timestamp is None else timestamp
        )

        def add_commit(current: Any) -> dict:
            log = CommitLog.from_json(current)
            log.append(commit)
            return log.to_json()

        # При ошибке записи хранилище восстанавливает прежний журнал,
        # так что коммит не сохраняется
        await self.store.update(project_id, add_commit)
        return commit

    async def list(self, project_id: str) -> List[Commit]:
        """Коммиты проекта в порядке добавления (старые первыми)"""
        log = await self._get_log(project_id)
        return log.commits

    async def get_head(self, project_id: str) -> Optional[Commit]:
        log = await self._get_log(project_id)
        return log.head_commit()

    async def clear(self, project_id: str) -> None:
        """Удаление всего журнала проекта"""
        await self.store.delete(project_id)

    async def _get_log(self, project_id: str) -> CommitLog:
        try:
            raw = await self.store.get(project_id)
        except NotFoundError:
            return CommitLog()
        return CommitLog.from_json(raw)
