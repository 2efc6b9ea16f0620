import uuid
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from studio.core.errors import SerializationError

DEFAULT_BRANCH = "main"


class Commit:
    """Неизменяемая запись истории: сообщение + снимок проекта"""

    __slots__ = ("id", "message", "timestamp", "snapshot")

    def __init__(self, id: str, message: str, timestamp: float, snapshot: Any):
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "timestamp", timestamp)
        object.__setattr__(self, "snapshot", snapshot)

    def __setattr__(self, name, value):
        raise AttributeError("Commit is immutable")

    @classmethod
    def create_commit(cls, message: str, snapshot: Any, timestamp: float) -> "Commit":
        """Создание нового коммита с уникальным идентификатором"""
        return cls(
            id=str(uuid.uuid4()),
            message=message,
            timestamp=timestamp,
            snapshot=snapshot
        )

    @classmethod
    def from_dict(cls, data: Any) -> "Commit":
        """Восстановление коммита из JSON-представления"""
        if not isinstance(data, dict):
            raise SerializationError("Commit must be a JSON object")
        try:
            commit_id = data["id"]
            message = data["message"]
            timestamp = data["timestamp"]
        except KeyError as e:
            raise SerializationError(f"Commit is missing field {e}") from e

        if not isinstance(commit_id, str) or not isinstance(message, str):
            raise SerializationError("Commit id and message must be strings")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise SerializationError("Commit timestamp must be a number")

        return cls(
            id=commit_id,
            message=message,
            timestamp=float(timestamp),
            snapshot=data.get("snapshot")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "timestamp": self.timestamp,
            "snapshot": self.snapshot
        }

    def to_info(self) -> "CommitInfo":
        return CommitInfo(
            id=self.id,
            message=self.message,
            timestamp=timestamp_to_datetime(self.timestamp)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Commit):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Commit(id={self.id}, message={self.message!r})"


class CommitLog:
    """Журнал коммитов проекта с явным указателем HEAD"""

    def __init__(self, commits: Optional[List[Commit]] = None, head: Optional[str] = None):
        self.commits: List[Commit] = list(commits or [])
        self.head = head

        if self.head is not None and self.find(self.head) is None:
            raise SerializationError(f"HEAD refers to unknown commit '{self.head}'")

        ids = [commit.id for commit in self.commits]
        if len(ids) != len(set(ids)):
            raise SerializationError("Commit ids must be unique")

    def find(self, commit_id: str) -> Optional[Commit]:
        for commit in self.commits:
            if commit.id == commit_id:
                return commit
        return None

    def head_commit(self) -> Optional[Commit]:
        """Коммит, на который указывает HEAD"""
        if self.head is None:
            return None
        return self.find(self.head)

    def append(self, commit: Commit) -> None:
        """Добавление коммита и перемещение HEAD на него"""
        if self.find(commit.id) is not None:
            raise ValueError(f"Commit '{commit.id}' already exists")
        self.commits.append(commit)
        self.head = commit.id

    def clear(self) -> None:
        self.commits = []
        self.head = None

    def __len__(self) -> int:
        return len(self.commits)

    @classmethod
    def from_json(cls, data: Any) -> "CommitLog":
        """Разбор журнала.

        Поддерживаются две формы: {"commits": [...], "head": id} и старый
        формат: просто список коммитов, где HEAD это последний элемент.
        """
        if data is None:
            return cls()

        if isinstance(data, list):
            commits = [Commit.from_dict(item) for item in data]
            head = commits[-1].id if commits else None
            return cls(commits, head)

        if isinstance(data, dict):
            raw_commits = data.get("commits", [])
            if not isinstance(raw_commits, list):
                raise SerializationError("'commits' must be a list")
            head = data.get("head")
            if head is not None and not isinstance(head, str):
                raise SerializationError("'head' must be a string or null")
            return cls([Commit.from_dict(item) for item in raw_commits], head)

        raise SerializationError("Commit log must be a list or an object")

    def to_json(self) -> Dict[str, Any]:
        return {
            "commits": [commit.to_dict() for commit in self.commits],
            "head": self.head
        }


class CommitInfo:
    """Запись журнала для отображения: без снимка"""

    def __init__(self, id: str, message: str, timestamp: datetime):
        self.id = id
        self.message = message
        self.timestamp = timestamp

    def __eq__(self, other) -> bool:
        if not isinstance(other, CommitInfo):
            return False
        return (self.id, self.message, self.timestamp) == (other.id, other.message, other.timestamp)

    def __repr__(self) -> str:
        return f"CommitInfo(id={self.id}, message={self.message!r})"


class RepoStatus:
    """Вычисляемое состояние репозитория; никогда не сохраняется"""

    def __init__(
        self,
        commit_count: int = 0,
        has_changes: bool = False,
        active: bool = True,
        branch: str = DEFAULT_BRANCH
    ):
        self.branch = branch
        self.commit_count = commit_count
        self.has_changes = has_changes
        self.clean = not has_changes
        self.active = active

    @classmethod
    def inactive(cls) -> "RepoStatus":
        return cls(commit_count=0, has_changes=False, active=False)

    def __repr__(self) -> str:
        return (
            f"RepoStatus(branch={self.branch}, commit_count={self.commit_count}, "
            f"clean={self.clean}, active={self.active})"
        )


def timestamp_to_datetime(timestamp_ms: float) -> datetime:
    """Перевод JS-таймстемпа (мс) в datetime UTC"""
    try:
        return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return datetime.fromtimestamp(0, tz=timezone.utc)
