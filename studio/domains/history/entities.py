import copy
import time
from collections import deque
from typing import Optional, List, Tuple, Any, Deque, Dict

MAX_HISTORY_SIZE = 50


class Snapshot:
    """Снимок состояния холста в момент времени"""

    __slots__ = ("components", "selected", "timestamp", "description")

    def __init__(
        self,
        components: List[Dict[str, Any]],
        selected: Optional[str] = None,
        timestamp: float = 0.0,
        description: str = ""
    ):
        object.__setattr__(self, "components", tuple(copy.deepcopy(list(components))))
        object.__setattr__(self, "selected", selected)
        object.__setattr__(self, "timestamp", timestamp)
        object.__setattr__(self, "description", description)

    def __setattr__(self, name, value):
        raise AttributeError("Snapshot is immutable")

    @classmethod
    def create(
        cls,
        components: List[Dict[str, Any]],
        selected: Optional[str] = None,
        description: str = ""
    ) -> "Snapshot":
        """Создание снимка с текущим временем"""
        return cls(
            components=components,
            selected=selected,
            timestamp=time.time() * 1000,
            description=description
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": copy.deepcopy(list(self.components)),
            "selected": self.selected,
            "timestamp": self.timestamp,
            "description": self.description
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Snapshot):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Snapshot(description={self.description!r}, components={len(self.components)})"


class UndoRedoHistory:
    """История отмены/повтора на двух стеках.

    Вершина undo-стека это текущее состояние; под ней то, к которому
    вернёт undo(). Любой новый push очищает redo-стек.
    """

    def __init__(self, max_size: int = MAX_HISTORY_SIZE):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._undo: Deque[Snapshot] = deque()
        self._redo: Deque[Snapshot] = deque()

    @classmethod
    def from_settings(cls, settings) -> "UndoRedoHistory":
        """История с размером из настроек (MAX_HISTORY_SIZE)"""
        return cls(max_size=settings.max_history_size)

    @property
    def undo_stack(self) -> Tuple[Snapshot, ...]:
        """Undo-стек от старых к новым"""
        return tuple(self._undo)

    @property
    def redo_stack(self) -> Tuple[Snapshot, ...]:
        """Redo-стек снизу вверх (последний элемент будет возвращён redo())"""
        return tuple(self._redo)

    def entries(self) -> List[Snapshot]:
        """Undo-стек от новых к старым (для панели истории)"""
        return list(reversed(self._undo))

    def push(self, snapshot: Snapshot) -> None:
        """Запись нового состояния"""
        self._redo.clear()
        self._undo.append(snapshot)

        if len(self._undo) > self.max_size:
            self._undo.popleft()

    def undo(self) -> Optional[Snapshot]:
        """Отмена: возвращает предыдущее состояние или None"""
        if len(self._undo) < 2:
            return None

        self._redo.append(self._undo.pop())
        return self._undo[-1]

    def redo(self) -> Optional[Snapshot]:
        """Повтор последнего отменённого действия"""
        if not self._redo:
            return None

        snapshot = self._redo.pop()
        self._undo.append(snapshot)
        return snapshot

    def restore_to_index(self, index: int) -> Optional[Snapshot]:
        """Переход к записи undo-стека с индексом index (0: самая старая).

        Более новые записи уходят в redo-стек, начиная с самой новой.
        """
        if index < 0 or index >= len(self._undo):
            return None

        while len(self._undo) > index + 1:
            self._redo.append(self._undo.pop())

        return self._undo[-1]

    def can_undo(self) -> bool:
        return len(self._undo) > 1

    def can_redo(self) -> bool:
        return len(self._redo) > 0

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
