"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing），
Gateway 只依赖此接口，不依赖具体存储引擎。
"""

from typing import Protocol

from ..models.task import Task


class TaskStore(Protocol):
    """Task 存储接口 -- 任务集合的唯一写入者"""

    async def list_tasks(self) -> list[Task]:
        """返回全部任务（顺序不属于契约）"""
        ...

    async def get_task(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        ...

    async def create_task(self, title: str) -> Task:
        """校验标题并创建任务，completed 恒为 False"""
        ...

    async def replace_task(self, task_id: int, title: str, completed: bool) -> Task:
        """整体替换任务记录（非合并）

        标题非法时抛 TaskValidationError，id 不存在时抛 TaskNotFoundError
        """
        ...

    async def delete_task(self, task_id: int) -> None:
        """删除任务，id 不存在时同样视为成功"""
        ...
