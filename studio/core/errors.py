from typing import Optional


class AppError(Exception):
    """Базовая ошибка приложения с сообщением для пользователя"""

    prefix = "Operation failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def user_message(self) -> str:
        """Сообщение, пригодное для показа в интерфейсе"""
        return f"{self.prefix}: {self.message}"


class ValidationError(AppError):
    """Некорректный запрос: пустое сообщение коммита, коммит без изменений"""

    prefix = "Validation failed"


class StorageError(AppError):
    """Ошибка чтения или записи долговременного хранилища"""

    prefix = "Storage error"


class SerializationError(AppError):
    """Повреждённые или некорректные данные при кодировании/декодировании"""

    prefix = "Failed to process data"


class NotFoundError(AppError):
    """Запрошенный ключ отсутствует в хранилище"""

    prefix = "Not found"


class NetworkError(AppError):
    """Неуспешный HTTP-ответ или сбой транспорта"""

    prefix = "Network error"

    def __init__(self, message: str, status_code: Optional[int] = None, reason: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason

    @classmethod
    def from_status(cls, status_code: int, reason: str = "") -> "NetworkError":
        """Ошибка по коду ответа сервера"""
        text = f"Server returned {status_code}"
        if reason:
            text = f"{text}: {reason}"
        return cls(text, status_code=status_code, reason=reason)
