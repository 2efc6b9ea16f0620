from typing import Optional

import httpx

from studio.core.config import Settings, get_settings
from studio.services.git.base import GitBackend, NoopGitBackend
from studio.services.git.local import LocalGitBackend
from studio.services.git.remote import RemoteGitBackend
from studio.services.storage import LocalStorage

BACKENDS = ("local", "remote", "noop")


def get_git_backend(
    settings: Optional[Settings] = None,
    project_id: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None
) -> GitBackend:
    """Создание Git-бэкенда по настройке GIT_BACKEND"""
    settings = settings or get_settings()
    kind = settings.git_backend.strip().lower()

    if kind == "local":
        return LocalGitBackend(
            LocalStorage(settings.local_storage_file),
            delay_ms=settings.local_git_delay_ms
        )
    if kind == "remote":
        if not project_id:
            raise ValueError("Remote git backend requires a project id")
        return RemoteGitBackend(
            project_id,
            api_url=settings.api_url,
            client=client,
            timeout=settings.remote_timeout_seconds
        )
    if kind == "noop":
        return NoopGitBackend()

    raise ValueError(f"Unknown git backend: {settings.git_backend!r} (expected one of {', '.join(BACKENDS)})")
