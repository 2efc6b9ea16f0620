from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Файлы серверных хранилищ (по одному на логическое хранилище)
    data_file: str = "projects.json"
    templates_file: str = "templates.json"
    git_data_file: str = "git_data.json"

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Клиентская часть: выбор бэкенда версий и его параметры
    api_url: str = "http://localhost:3000"
    git_backend: str = "local"
    local_storage_file: str = "local_storage.json"
    local_git_delay_ms: int = 50
    remote_timeout_seconds: float = 10.0

    max_history_size: int = 50

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()


def get_settings() -> Settings:
    """Зависимость для получения настроек приложения"""
    return settings
