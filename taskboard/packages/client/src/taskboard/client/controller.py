"""TaskController -- 客户端任务操作与状态对账

所有变更都是非乐观的：先等待服务端确认，再修改本地列表。
失败时本地列表保持不变，异常原样抛给调用方，不做自动重试。

同一 id 上并发发起的操作不做串行化：哪个响应最后返回，
哪个就决定本地列表中该 id 的状态。例如"切换"与"删除"几乎同时发出，
而切换的响应晚于删除返回时，该条目会以切换后的状态重新出现。
"""

import structlog
from taskboard.core.models import Task, TaskDraft, normalize_title

from .client import TaskApiClient
from .state import TaskListState

log = structlog.get_logger()


class TaskController:
    """持有本地任务列表，并把每次用户操作映射为一次 API 调用"""

    def __init__(self, api: TaskApiClient, state: TaskListState | None = None) -> None:
        self._api = api
        self.state = state or TaskListState()

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self.state.tasks

    async def load(self) -> tuple[Task, ...]:
        """拉取服务端列表作为初始状态"""
        tasks = await self._api.list_tasks()
        self.state.reset(tasks)
        log.info("task_list_loaded", count=len(tasks))
        return self.state.tasks

    async def add(self, title: str) -> Task:
        """创建任务，服务端确认后追加到列表末尾

        Raises:
            TaskValidationError: 标题非法（本地预校验，不发请求；或服务端拒绝）
            TransportError: API 不可达
        """
        draft = TaskDraft(title=normalize_title(title))
        try:
            task = await self._api.create_task(draft)
        except Exception as e:
            log.warning("task_add_failed", error=str(e), error_type=type(e).__name__)
            raise
        self.state.append(task)
        log.info("task_added", task_id=task.id)
        return task

    async def toggle(self, task_id: int) -> Task | None:
        """翻转 completed，以服务端返回的任务整体替换本地条目

        本地不存在该 id 时视为过期引用，直接返回 None。

        Raises:
            TaskNotFoundError: 服务端已不存在该 id
            TransportError: API 不可达
        """
        current = self.state.find(task_id)
        if current is None:
            log.debug("task_toggle_skipped", task_id=task_id)
            return None

        next_state = current.with_completed(not current.completed)
        try:
            task = await self._api.replace_task(next_state)
        except Exception as e:
            log.warning(
                "task_toggle_failed",
                task_id=task_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        if not self.state.put(task):
            # 切换响应晚于同 id 的删除返回
            log.warning("task_toggle_resurrected", task_id=task_id)
        log.info("task_toggled", task_id=task.id, completed=task.completed)
        return task

    async def delete(self, task_id: int) -> None:
        """删除任务，服务端确认后才从本地列表移除

        Raises:
            TransportError: API 不可达
        """
        try:
            await self._api.delete_task(task_id)
        except Exception as e:
            log.warning(
                "task_delete_failed",
                task_id=task_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        self.state.remove(task_id)
        log.info("task_deleted", task_id=task_id)
