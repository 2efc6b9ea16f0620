import json
import logging
import time
from typing import Optional, List, Any, Type

import httpx
from pydantic import BaseModel

from studio.core.errors import NetworkError, SerializationError
from studio.domains.projects.schemas import Project
from studio.domains.vcs.dirty import EqualityPredicate
from studio.domains.vcs.entities import Commit, CommitInfo, RepoStatus
from studio.services.git.base import GitBackend

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000"


def projects_api_base(api_url: str) -> str:
    return f"{api_url.rstrip('/')}/api/projects"


class RemoteGitBackend(GitBackend):
    """Git-бэкенд поверх серверного журнала коммитов.

    HEAD на сервере это последний элемент списка, поэтому здесь он
    вычисляется так же. 404 при чтении журнала означает пустую историю.
    """

    def __init__(
        self,
        project_id: str,
        api_url: str = DEFAULT_API_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        snapshot_model: Optional[Type[BaseModel]] = Project,
        equality: Optional[EqualityPredicate] = None
    ):
        super().__init__(snapshot_model=snapshot_model, equality=equality)
        if not project_id:
            raise ValueError("RemoteGitBackend requires a project id")
        self.project_id = project_id
        self.api_url = api_url
        self.timeout = timeout
        self._client = client

    @property
    def commits_url(self) -> str:
        return f"{projects_api_base(self.api_url)}/{self.project_id}/commits"

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def status(self, working: Optional[Any] = None) -> RepoStatus:
        commits = await self._get_commits()
        head = commits[-1] if commits else None
        return RepoStatus(
            commit_count=len(commits),
            has_changes=self.has_changes(working, head),
            active=True
        )

    async def log(self) -> List[CommitInfo]:
        commits = await self._get_commits()
        return [commit.to_info() for commit in reversed(commits)]

    async def commit(self, working: Any, message: str) -> None:
        commits = await self._get_commits()
        self.validate_commit(working, message, commits[-1] if commits else None)

        payload = {
            "message": message,
            "timestamp": time.time() * 1000,
            "snapshot": self.encode_snapshot(working)
        }
        response = await self._request("POST", json=payload)
        if not response.is_success:
            raise NetworkError.from_status(response.status_code, response.reason_phrase)

        logger.info(f"Committed to project {self.project_id} ({message!r})")

    async def push(self) -> Optional[str]:
        """История уже на сервере; возвращаем её JSON для единообразия с UI"""
        commits = await self._get_commits()
        return json.dumps([commit.to_dict() for commit in commits], indent=2)

    async def clone_repo(self, blob: str) -> None:
        # Импорт истории на сервер не поддерживается
        return None

    async def restore_head(self) -> Optional[Any]:
        commits = await self._get_commits()
        if not commits:
            return None
        return self.decode_snapshot(commits[-1].snapshot)

    async def reset(self) -> None:
        response = await self._request("DELETE")
        # 404: истории уже нет, сброс идемпотентен
        if response.status_code == 404:
            return
        if not response.is_success:
            raise NetworkError.from_status(response.status_code, response.reason_phrase)

    async def _get_commits(self) -> List[Commit]:
        response = await self._request("GET")

        if response.status_code == 404:
            return []
        if not response.is_success:
            raise NetworkError.from_status(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as e:
            raise SerializationError(f"Invalid commit list from server: {e}") from e

        if not isinstance(data, list):
            raise SerializationError("Commit list from server must be a JSON array")
        return [Commit.from_dict(item) for item in data]

    async def _request(self, method: str, **kwargs) -> httpx.Response:
        try:
            return await self.client.request(method, self.commits_url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {self.commits_url} failed: {e}")
            raise NetworkError(str(e) or e.__class__.__name__) from e
