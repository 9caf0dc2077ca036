"""TraceMiddleware -- 为单任务操作绑定 task_id

从 /tasks/{id} 路径中提取 id，绑定到 structlog contextvars，
贯穿该请求内的全部日志。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        parts = request.url.path.rstrip("/").split("/")
        for i, part in enumerate(parts):
            if part == "tasks" and i + 1 < len(parts) and parts[i + 1].isdigit():
                structlog.contextvars.bind_contextvars(task_id=int(parts[i + 1]))
                break

        return await call_next(request)
