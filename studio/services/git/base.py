import json
from abc import ABC, abstractmethod
from typing import Optional, List, Any, Type

from pydantic import BaseModel, ValidationError as PydanticValidationError

from studio.core.errors import ValidationError, SerializationError
from studio.domains.projects.schemas import Project
from studio.domains.vcs.dirty import EqualityPredicate, deep_equal, is_dirty, normalize
from studio.domains.vcs.entities import Commit, CommitInfo, RepoStatus


class GitBackend(ABC):
    """Абстракция над операциями контроля версий.

    Реализации (локальная и удалённая) обязаны вести себя одинаково:
    одинаковое правило «грязного» состояния, журнал от новых к старым,
    одинаковые проверки перед коммитом.
    """

    def __init__(
        self,
        snapshot_model: Optional[Type[BaseModel]] = Project,
        equality: Optional[EqualityPredicate] = None
    ):
        self.snapshot_model = snapshot_model
        self.equality = equality or deep_equal

    @abstractmethod
    async def status(self, working: Optional[Any] = None) -> RepoStatus:
        """Состояние репозитория относительно рабочего снимка"""

    @abstractmethod
    async def log(self) -> List[CommitInfo]:
        """Журнал коммитов, новые первыми"""

    @abstractmethod
    async def commit(self, working: Any, message: str) -> None:
        """Коммит рабочего снимка; HEAD переходит на новый коммит"""

    @abstractmethod
    async def push(self) -> Optional[str]:
        """Экспорт истории (JSON) или None, если она уже сохранена удалённо"""

    @abstractmethod
    async def clone_repo(self, blob: str) -> None:
        """Полная замена локального репозитория содержимым blob"""

    @abstractmethod
    async def restore_head(self) -> Optional[Any]:
        """Снимок из HEAD или None, если коммитов нет"""

    @abstractmethod
    async def reset(self) -> None:
        """Удаление всех коммитов и HEAD; идемпотентно"""

    def has_changes(self, working: Optional[Any], head: Optional[Commit]) -> bool:
        head_snapshot = head.snapshot if head is not None else None
        return is_dirty(working, head_snapshot, self.equality)

    def validate_commit(self, working: Any, message: str, head: Optional[Commit]) -> None:
        """Проверки до любой записи: пустое сообщение и отсутствие изменений"""
        if not message or not message.strip():
            raise ValidationError("Commit message cannot be empty")
        if working is None:
            raise ValidationError("Nothing to commit")
        if not self.has_changes(working, head):
            raise ValidationError("No changes to commit")

    def encode_snapshot(self, working: Any) -> Any:
        """Рабочий снимок в JSON-совместимом виде; проверяется до любой записи"""
        encoded = normalize(working)
        try:
            json.dumps(encoded)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Working snapshot cannot be serialized: {e}") from e
        return encoded

    def decode_snapshot(self, snapshot: Any) -> Any:
        if self.snapshot_model is None:
            return snapshot
        try:
            return self.snapshot_model.model_validate(snapshot)
        except PydanticValidationError as e:
            raise SerializationError(f"HEAD snapshot cannot be decoded: {e}") from e


class NoopGitBackend(GitBackend):
    """Бэкенд без контроля версий: ничего не сохраняет и не падает"""

    async def status(self, working: Optional[Any] = None) -> RepoStatus:
        return RepoStatus.inactive()

    async def log(self) -> List[CommitInfo]:
        return []

    async def commit(self, working: Any, message: str) -> None:
        return None

    async def push(self) -> Optional[str]:
        return None

    async def clone_repo(self, blob: str) -> None:
        return None

    async def restore_head(self) -> Optional[Any]:
        return None

    async def reset(self) -> None:
        return None
