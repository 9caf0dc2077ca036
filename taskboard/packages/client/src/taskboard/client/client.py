"""TaskApiClient -- 任务 REST 资源的 httpx 封装

每个方法对应一次 HTTP 调用，不做任何重试。
响应体在边界处校验为 Task 模型。
"""

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError
from taskboard.core.exceptions import TaskNotFoundError, TaskValidationError
from taskboard.core.models import Task, TaskDraft

from .config import ClientConfig
from .exceptions import TransportError, UnexpectedResponseError

log = structlog.get_logger()

_TASK_LIST = TypeAdapter(list[Task])


def _error_message(response: httpx.Response) -> str:
    """提取服务端错误体中的 message，取不到时退回原始文本"""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.text


class TaskApiClient:
    """任务 API 客户端

    可注入 httpx transport（测试中使用 ASGITransport / MockTransport）。
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._base_url = self._config.base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._config.timeout_s,
            transport=transport,
        )

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_tasks(self) -> list[Task]:
        """GET /tasks"""
        response = await self._request("GET", "/tasks")
        self._raise_for_status(response, expected=(200,))
        return self._parse(response, _TASK_LIST)

    async def create_task(self, draft: TaskDraft) -> Task:
        """POST /tasks

        Raises:
            TaskValidationError: 服务端拒绝标题（422）
        """
        response = await self._request("POST", "/tasks", json=draft.model_dump())
        self._raise_for_status(response, expected=(200, 201))
        return self._parse(response, Task)

    async def replace_task(self, task: Task) -> Task:
        """PUT /tasks/{id}，发送完整目标状态

        Raises:
            TaskValidationError: 标题为空（422）
            TaskNotFoundError: id 不存在（404）
        """
        response = await self._request(
            "PUT",
            f"/tasks/{task.id}",
            json={"title": task.title, "completed": task.completed},
        )
        self._raise_for_status(response, expected=(200,), task_id=task.id)
        return self._parse(response, Task)

    async def delete_task(self, task_id: int) -> None:
        """DELETE /tasks/{id}（幂等）"""
        response = await self._request("DELETE", f"/tasks/{task_id}")
        self._raise_for_status(response, expected=(200, 204), task_id=task_id)

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            return await self._http.request(method, path, **kwargs)
        except httpx.TransportError as e:
            log.warning(
                "task_api_unreachable",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(base_url=self._base_url, original_error=e) from e

    @staticmethod
    def _raise_for_status(
        response: httpx.Response,
        expected: tuple[int, ...],
        task_id: int | None = None,
    ) -> None:
        if response.status_code in expected:
            return
        if response.status_code == 404 and task_id is not None:
            raise TaskNotFoundError(task_id)
        if response.status_code == 422:
            raise TaskValidationError(_error_message(response))
        raise UnexpectedResponseError(response.status_code, _error_message(response))

    @staticmethod
    def _parse(response: httpx.Response, schema):
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_json(response.content)
            return schema.model_validate_json(response.content)
        except ValidationError as e:
            raise UnexpectedResponseError(response.status_code, str(e)) from e
