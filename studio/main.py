import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studio.api.http import health_router, projects_router, commits_router, templates_router
from studio.core.config import Settings, get_settings
from studio.core.db import Stores

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, stores: Optional[Stores] = None) -> FastAPI:
    """Сборка приложения: хранилища загружаются с диска один раз при старте"""
    settings = settings or get_settings()

    app = FastAPI(
        title="Studio",
        description="Хранилище проектов, шаблонов и истории версий визуального редактора",
        version="1.0.0"
    )

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.stores = stores or Stores.from_settings(settings)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(projects_router)
    app.include_router(commits_router)
    app.include_router(templates_router)

    return app


def run() -> None:
    """Точка входа для запуска сервера"""
    import uvicorn

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logger.info("Starting studio server on 127.0.0.1:3000")
    uvicorn.run(create_app(), host="127.0.0.1", port=3000)


if __name__ == "__main__":
    run()
