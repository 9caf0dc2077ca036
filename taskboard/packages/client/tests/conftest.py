"""Client 包测试 fixtures"""

import asyncio

import pytest
from taskboard.core.exceptions import TaskNotFoundError
from taskboard.core.models import Task, TaskDraft


class FakeTaskApi:
    """内存中的任务 API

    - fail_with: 设置后下一次调用抛出该异常（只生效一次）
    - request_gates: method 名 -> asyncio.Event，请求在"到达服务端"之前挂起
    - response_gates: method 名 -> asyncio.Event，服务端已生效、响应在返回途中挂起

    两类 gate 用于在测试中精确控制服务端处理顺序与响应返回顺序。
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: dict[int, Task] = {t.id: t for t in tasks or []}
        self._next_id = max(self.tasks, default=0) + 1
        self.calls: list[tuple] = []
        self.fail_with: Exception | None = None
        self.request_gates: dict[str, asyncio.Event] = {}
        self.response_gates: dict[str, asyncio.Event] = {}

    async def _request(self, method: str, *args) -> None:
        self.calls.append((method, *args))
        if self.fail_with is not None:
            error, self.fail_with = self.fail_with, None
            raise error
        if gate := self.request_gates.get(method):
            await gate.wait()

    async def _respond(self, method: str) -> None:
        if gate := self.response_gates.get(method):
            await gate.wait()

    async def list_tasks(self) -> list[Task]:
        await self._request("list_tasks")
        tasks = list(self.tasks.values())
        await self._respond("list_tasks")
        return tasks

    async def create_task(self, draft: TaskDraft) -> Task:
        await self._request("create_task", draft)
        task = Task(id=self._next_id, title=draft.title, completed=False)
        self._next_id += 1
        self.tasks[task.id] = task
        await self._respond("create_task")
        return task

    async def replace_task(self, task: Task) -> Task:
        await self._request("replace_task", task)
        if task.id not in self.tasks:
            raise TaskNotFoundError(task.id)
        self.tasks[task.id] = task
        await self._respond("replace_task")
        return task

    async def delete_task(self, task_id: int) -> None:
        await self._request("delete_task", task_id)
        self.tasks.pop(task_id, None)
        await self._respond("delete_task")


@pytest.fixture
def fake_api() -> FakeTaskApi:
    return FakeTaskApi(
        [
            Task(id=1, title="write report", completed=False),
            Task(id=2, title="buy milk", completed=True),
        ]
    )
