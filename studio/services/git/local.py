import asyncio
import json
import logging
import time
from typing import Optional, List, Any, Type

from pydantic import BaseModel

from studio.core.errors import SerializationError
from studio.domains.projects.schemas import Project
from studio.domains.vcs.dirty import EqualityPredicate
from studio.domains.vcs.entities import Commit, CommitLog, CommitInfo, RepoStatus
from studio.services.git.base import GitBackend
from studio.services.storage import LocalStorage

logger = logging.getLogger(__name__)

REPOSITORY_KEY = "studio_git_repo"
DEFAULT_DELAY_MS = 50


class LocalGitBackend(GitBackend):
    """Git-бэкенд, хранящий {commits, head} в локальном хранилище.

    Перед каждой операцией выдерживается фиксированная задержка, чтобы
    поведение совпадало с асинхронным вводом-выводом удалённого бэкенда.
    """

    def __init__(
        self,
        storage: LocalStorage,
        delay_ms: int = DEFAULT_DELAY_MS,
        snapshot_model: Optional[Type[BaseModel]] = Project,
        equality: Optional[EqualityPredicate] = None
    ):
        super().__init__(snapshot_model=snapshot_model, equality=equality)
        self.storage = storage
        self.delay_ms = delay_ms

    async def status(self, working: Optional[Any] = None) -> RepoStatus:
        await self._delay()
        repo = await self._load_repo()
        return RepoStatus(
            commit_count=len(repo),
            has_changes=self.has_changes(working, repo.head_commit()),
            active=True
        )

    async def log(self) -> List[CommitInfo]:
        await self._delay()
        repo = await self._load_repo()
        return [commit.to_info() for commit in reversed(repo.commits)]

    async def commit(self, working: Any, message: str) -> None:
        await self._delay()
        repo = await self._load_repo()
        self.validate_commit(working, message, repo.head_commit())

        commit = Commit.create_commit(
            message=message,
            snapshot=self.encode_snapshot(working),
            timestamp=time.time() * 1000
        )
        repo.append(commit)
        await self._save_repo(repo)
        logger.info(f"Committed {commit.id} ({message!r})")

    async def push(self) -> Optional[str]:
        """Экспорт всей истории для ручного бэкапа"""
        await self._delay()
        repo = await self._load_repo()
        return json.dumps(repo.to_json(), indent=2)

    async def clone_repo(self, blob: str) -> None:
        await self._delay()
        try:
            data = json.loads(blob)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Repository dump is not valid JSON: {e}") from e

        # Разбор до записи: при ошибке текущий репозиторий не трогаем
        repo = CommitLog.from_json(data)
        await self._save_repo(repo)
        logger.info(f"Repository replaced from dump ({len(repo)} commits)")

    async def restore_head(self) -> Optional[Any]:
        await self._delay()
        head = (await self._load_repo()).head_commit()
        if head is None:
            return None
        return self.decode_snapshot(head.snapshot)

    async def reset(self) -> None:
        await self._delay()
        await asyncio.to_thread(self.storage.remove_item, REPOSITORY_KEY)
        logger.info("Local repository reset")

    async def _delay(self) -> None:
        if self.delay_ms > 0:
            await asyncio.sleep(self.delay_ms / 1000)

    async def _load_repo(self) -> CommitLog:
        # Файловый ввод-вывод хранилища синхронный, выносим его из event loop
        record = await asyncio.to_thread(self.storage.load_record, REPOSITORY_KEY)
        return CommitLog.from_json(record)

    async def _save_repo(self, repo: CommitLog) -> None:
        await asyncio.to_thread(self.storage.save_record, REPOSITORY_KEY, repo.to_json())
