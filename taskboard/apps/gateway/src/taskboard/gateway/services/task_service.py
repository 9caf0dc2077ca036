"""TaskService -- 任务资源业务逻辑

无状态：每次 HTTP 请求恰好对应一次 Store 调用。
Store 抛出的 TaskValidationError / TaskNotFoundError 原样向上传递，
由路由层映射为 HTTP 状态码。
"""

import structlog
from taskboard.core.exceptions import TaskNotFoundError, TaskValidationError
from taskboard.core.models import Task
from taskboard.core.store import TaskStore

log = structlog.get_logger()


class TaskService:
    """任务业务服务"""

    def __init__(self, task_store: TaskStore) -> None:
        self._store = task_store

    async def list_tasks(self) -> list[Task]:
        """查询全部任务"""
        return await self._store.list_tasks()

    async def create_task(self, title: str) -> Task:
        """创建任务，completed 始终为 False"""
        try:
            task = await self._store.create_task(title)
        except TaskValidationError as e:
            log.info("task_title_rejected", reason=e.message)
            raise
        log.info("task_created", task_id=task.id)
        return task

    async def replace_task(self, task_id: int, title: str, completed: bool) -> Task:
        """整体替换任务"""
        try:
            task = await self._store.replace_task(task_id, title, completed)
        except TaskValidationError as e:
            log.info("task_title_rejected", task_id=task_id, reason=e.message)
            raise
        except TaskNotFoundError:
            log.info("task_not_found", task_id=task_id)
            raise
        log.info("task_replaced", task_id=task.id, completed=task.completed)
        return task

    async def delete_task(self, task_id: int) -> None:
        """删除任务（幂等）"""
        await self._store.delete_task(task_id)
        log.info("task_deleted", task_id=task_id)
