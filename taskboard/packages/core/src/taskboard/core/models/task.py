"""Task Domain Model

Task 以两种形态存在：
- TaskDraft: 仅存在于客户端、尚未被 Store 接受，没有 id
- Task: 已持久化，id 由 Store 分配且此后不变

两者是不同的类型，"对草稿执行切换"这类非法状态无法被构造出来。
"""

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import TaskValidationError


def normalize_title(title: str) -> str:
    """校验任务标题，合法时原样返回

    Raises:
        TaskValidationError: 标题为空或仅含空白
    """
    if not title or not title.strip():
        raise TaskValidationError("Task title must not be empty")
    return title


class TaskDraft(BaseModel):
    """尚未提交的任务草稿"""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="任务标题")
    completed: bool = Field(default=False, description="是否已完成")


class Task(BaseModel):
    """已持久化的任务"""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Store 分配的唯一标识，删除后不复用")
    title: str = Field(description="任务标题")
    completed: bool = Field(default=False, description="是否已完成")

    def with_completed(self, completed: bool) -> "Task":
        """返回仅 completed 不同的完整下一状态"""
        return self.model_copy(update={"completed": completed})
