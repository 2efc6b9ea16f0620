import json
import logging
from pathlib import Path
from typing import Optional, Any, Dict

from studio.core.errors import StorageError, SerializationError

logger = logging.getLogger(__name__)


class LocalStorage:
    """Локальное долговременное хранилище "ключ -> строка" в одном JSON-файле"""

    def __init__(self, path: str):
        self.path = Path(path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

    def load_record(self, key: str) -> Optional[Any]:
        """Чтение JSON-записи по ключу; None если записи нет"""
        raw = self.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise SerializationError(f"Record '{key}' is not valid JSON: {e}") from e

    def save_record(self, key: str, value: Any) -> None:
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Record '{key}' cannot be serialized: {e}") from e
        self.set_item(key, raw)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read from {self.path}: {e}") from e

        try:
            items = json.loads(text) if text.strip() else {}
        except ValueError as e:
            raise SerializationError(f"Local storage file {self.path} is corrupted: {e}") from e

        if not isinstance(items, dict):
            raise SerializationError(f"Local storage file {self.path} must hold a JSON object")
        return items

    def _write_all(self, items: Dict[str, str]) -> None:
        try:
            self.path.write_text(json.dumps(items, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save to {self.path}: {e}")
            raise StorageError(f"Failed to save to {self.path}: {e}") from e
