import asyncio
import copy
import json
import logging
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from studio.core.errors import NotFoundError, StorageError
from studio.core.locks import ReadWriteLock

logger = logging.getLogger(__name__)

_MISSING = object()


def now_ms() -> float:
    """Текущее время в миллисекундах (как Date.now() на клиенте)"""
    return time.time() * 1000


class JsonDocumentStore:
    """Хранилище JSON-документов по ключу с записью на диск и откатом.

    Каждое изменение сначала применяется к карте в памяти, затем вся карта
    целиком записывается в файл. Если запись не удалась, карта в памяти
    возвращается к состоянию до изменения и выбрасывается StorageError.
    """

    def __init__(self, path: str, name: str = "documents", stamp_modified: bool = True):
        self.path = Path(path)
        self.name = name
        self.stamp_modified = stamp_modified
        self._data: Dict[str, Any] = {}
        self._lock = ReadWriteLock()

    @classmethod
    def open(cls, path: str, name: str = "documents", stamp_modified: bool = True) -> "JsonDocumentStore":
        """Создание хранилища и загрузка данных с диска"""
        store = cls(path, name=name, stamp_modified=stamp_modified)
        store.load()
        return store

    def load(self) -> None:
        """Синхронная загрузка при старте процесса"""
        if not self.path.exists():
            self._data = {}
            return

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load {self.name} from {self.path}: {e}")
            self._data = {}
            return

        if not isinstance(data, dict):
            logger.error(f"Failed to load {self.name} from {self.path}: expected a JSON object")
            self._data = {}
            return

        self._data = data
        logger.info(f"Loaded {len(data)} {self.name} from {self.path}")

    async def list(self) -> List[Any]:
        """Все документы, отсортированные по last_modified (новые первыми)"""
        async with self._lock.read():
            values = [copy.deepcopy(value) for value in self._data.values()]

        # sort стабилен: при равных last_modified сохраняется порядок вставки
        values.sort(key=_last_modified, reverse=True)
        return values

    async def keys(self) -> List[str]:
        async with self._lock.read():
            return list(self._data.keys())

    async def get(self, key: str) -> Any:
        """Получение документа по ключу"""
        async with self._lock.read():
            if key not in self._data:
                raise NotFoundError(f"{self.name} entry '{key}' not found")
            return copy.deepcopy(self._data[key])

    async def put(self, key: Optional[str], document: Any) -> Any:
        """Сохранение документа; пустой ключ означает новый документ"""
        if not key:
            key = str(uuid.uuid4())

        document = copy.deepcopy(document)
        if isinstance(document, dict):
            document["id"] = key
            if self.stamp_modified:
                document["last_modified"] = now_ms()

        async with self._lock.write():
            await self._apply(key, document)

        return copy.deepcopy(document)

    async def update(self, key: str, mutator: Callable[[Any], Any]) -> Any:
        """Чтение-изменение-запись одного ключа под одной блокировкой записи.

        mutator получает копию текущего значения (или None) и возвращает новое.
        """
        async with self._lock.write():
            current = copy.deepcopy(self._data.get(key))
            new_value = mutator(current)
            await self._apply(key, new_value)

        return copy.deepcopy(new_value)

    async def delete(self, key: str) -> Any:
        """Удаление документа; при ошибке записи документ возвращается на место"""
        async with self._lock.write():
            if key not in self._data:
                raise NotFoundError(f"{self.name} entry '{key}' not found")

            removed = self._data.pop(key)
            try:
                await self._persist()
            except StorageError:
                logger.error(f"Rolling back delete of {self.name} entry '{key}'")
                self._data[key] = removed
                raise

        return removed

    async def _apply(self, key: str, value: Any) -> None:
        """Применение значения в памяти и запись на диск (вызывается под write-lock)"""
        previous = self._data.get(key, _MISSING)
        self._data[key] = value

        try:
            await self._persist()
        except StorageError:
            logger.error(f"Rolling back write of {self.name} entry '{key}'")
            if previous is _MISSING:
                del self._data[key]
            else:
                self._data[key] = previous
            raise

    async def _persist(self) -> None:
        """Полная перезапись файла хранилища"""
        try:
            payload = json.dumps(self._data, indent=2, ensure_ascii=False)
            await asyncio.to_thread(self._write_file, payload)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save {self.name} to {self.path}: {e}")
            raise StorageError(f"Failed to save {self.name}: {e}") from e

    def _write_file(self, payload: str) -> None:
        self.path.write_text(payload, encoding="utf-8")


def _last_modified(value: Any) -> float:
    if isinstance(value, dict):
        stamp = value.get("last_modified")
        if isinstance(stamp, (int, float)) and not isinstance(stamp, bool):
            return float(stamp)
    return 0.0
