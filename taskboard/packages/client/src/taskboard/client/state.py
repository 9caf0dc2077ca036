"""TaskListState -- 客户端任务列表的显式状态容器

插入顺序即展示顺序。只有 TaskController 写入；
loaded=False 表示初始加载尚未完成（"加载中"），而不是"列表为空"。
"""

from taskboard.core.models import Task


class TaskListState:
    """单写者的有序任务列表"""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self.loaded = False

    @property
    def tasks(self) -> tuple[Task, ...]:
        """当前列表快照"""
        return tuple(self._tasks)

    def find(self, task_id: int) -> Task | None:
        """按 id 查找任务"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def reset(self, tasks: list[Task]) -> None:
        """用服务端列表整体替换本地列表，并标记为已加载"""
        self._tasks = list(tasks)
        self.loaded = True

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def put(self, task: Task) -> bool:
        """原位替换同 id 的条目；不存在时追加到末尾

        Returns:
            True 如果原位替换，False 如果追加
        """
        for i, existing in enumerate(self._tasks):
            if existing.id == task.id:
                self._tasks[i] = task
                return True
        self._tasks.append(task)
        return False

    def remove(self, task_id: int) -> bool:
        """移除同 id 的条目

        Returns:
            True 如果确有条目被移除
        """
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        return len(self._tasks) != before
