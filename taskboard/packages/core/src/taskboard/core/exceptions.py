"""Task 异常体系

Store 层抛出，Gateway 映射为 HTTP 状态码，Client 再映射回同一组类型，
保证线路两端看到的是同一套错误分类。
"""


class TaskError(Exception):
    """Task 领域基础异常"""

    code: str = "TASK_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskError):
    """标题为空、仅含空白或超长

    在任何 Store 写入之前抛出。
    """

    code = "TASK_TITLE_INVALID"


class TaskNotFoundError(TaskError):
    """引用的 id 在 Store 中不存在

    删除不存在的 id 不属于此异常（删除幂等）。
    """

    code = "TASK_NOT_FOUND"

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} does not exist")
        self.task_id = task_id
