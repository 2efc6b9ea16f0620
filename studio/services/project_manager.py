import time
import uuid
from typing import Optional, List, Dict, Any

import httpx

from studio.core.errors import NetworkError, SerializationError
from studio.domains.projects.schemas import Project, ProjectMetadata
from studio.services.git.remote import DEFAULT_API_URL, projects_api_base


class ProjectManager:
    """HTTP-клиент серверного хранилища проектов"""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0
    ):
        self.base_url = projects_api_base(api_url)
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def list_projects(self) -> List[ProjectMetadata]:
        """Список проектов"""
        data = await self._request_json("GET", self.base_url)
        try:
            return [ProjectMetadata.model_validate(item) for item in data]
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Invalid project list: {e}") from e

    async def save_project(self, project_id: str, project: Project) -> ProjectMetadata:
        """Сохранение проекта под заданным id"""
        payload: Dict[str, Any] = project.model_dump(mode="json")
        payload["id"] = project_id
        payload["last_modified"] = time.time() * 1000

        data = await self._request_json("POST", self.base_url, json=payload)
        try:
            return ProjectMetadata.model_validate(data)
        except ValueError as e:
            raise SerializationError(f"Invalid save response: {e}") from e

    async def load_project(self, project_id: str) -> Project:
        """Загрузка проекта"""
        data = await self._request_json("GET", f"{self.base_url}/{project_id}")
        try:
            return Project.model_validate(data)
        except ValueError as e:
            raise SerializationError(f"Invalid project '{project_id}': {e}") from e

    async def delete_project(self, project_id: str) -> None:
        await self._send("DELETE", f"{self.base_url}/{project_id}")

    async def rename_project(self, project_id: str, new_name: str) -> ProjectMetadata:
        """Переименование: загрузка, изменение имени, сохранение"""
        project = await self.load_project(project_id)
        project.name = new_name
        return await self.save_project(project_id, project)

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise NetworkError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            raise NetworkError.from_status(response.status_code, response.reason_phrase)
        return response

    async def _request_json(self, method: str, url: str, **kwargs) -> Any:
        response = await self._send(method, url, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise SerializationError(f"Invalid JSON from server: {e}") from e
