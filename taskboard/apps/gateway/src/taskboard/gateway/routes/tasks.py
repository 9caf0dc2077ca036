"""任务资源路由

GET    /tasks       任务列表
POST   /tasks       创建任务（请求体中的 completed 被忽略）
PUT    /tasks/{id}  整体替换任务（以路径 id 为准）
DELETE /tasks/{id}  删除任务（幂等）
"""

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field
from starlette.responses import JSONResponse
from taskboard.core.exceptions import TaskError, TaskNotFoundError, TaskValidationError
from taskboard.core.models import Task

from ..deps import get_task_service
from ..services.task_service import TaskService

router = APIRouter()


class TaskCreateRequest(BaseModel):
    """创建任务请求体"""

    title: str = Field(description="任务标题")
    completed: bool = Field(default=False, description="忽略，新任务总是未完成")


class TaskReplaceRequest(BaseModel):
    """替换任务请求体 -- 必须携带完整的目标状态"""

    id: int | None = Field(default=None, description="忽略，以路径 id 为准")
    title: str = Field(description="任务标题")
    completed: bool = Field(description="是否已完成")


class TaskResponse(BaseModel):
    """任务响应"""

    id: int
    title: str
    completed: bool

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(id=task.id, title=task.title, completed=task.completed)


def _error_response(status_code: int, error: TaskError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": error.code,
                "message": error.message,
            }
        },
    )


@router.get("/tasks", response_model=list[TaskResponse])
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """查询全部任务，可能为空列表"""
    tasks = await service.list_tasks()
    return [TaskResponse.from_task(t) for t in tasks]


@router.post("/tasks", response_model=TaskResponse, status_code=201)
async def create_task(
    body: TaskCreateRequest,
    service: TaskService = Depends(get_task_service),
):
    """创建任务

    - 成功返回 201 + 带新 id 的任务
    - 标题为空返回 422
    """
    try:
        task = await service.create_task(body.title)
    except TaskValidationError as e:
        return _error_response(422, e)
    return TaskResponse.from_task(task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def replace_task(
    task_id: int,
    body: TaskReplaceRequest,
    service: TaskService = Depends(get_task_service),
):
    """整体替换任务

    - 成功返回 200 + 替换后的任务
    - 标题为空返回 422
    - id 不存在返回 404
    """
    try:
        task = await service.replace_task(task_id, body.title, body.completed)
    except TaskValidationError as e:
        return _error_response(422, e)
    except TaskNotFoundError as e:
        return _error_response(404, e)
    return TaskResponse.from_task(task)


@router.delete("/tasks/{task_id}", status_code=204)
async def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
):
    """删除任务，无论记录是否存在都返回 204"""
    await service.delete_task(task_id)
    return Response(status_code=204)
