"""LoggingMiddleware -- 每个请求一条开始、一条结束日志

request_id（ULID）绑定到 structlog contextvars，并通过 X-Request-ID 响应头回传。
"""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID

REQUEST_ID_HEADER = "X-Request-ID"

log = structlog.get_logger()


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(ULID())
        started = time.monotonic()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        await log.ainfo("request_started")

        try:
            response = await call_next(request)
        except Exception:
            # Store 层的未预期错误：记录后交给 Starlette 生成 500
            await log.aexception("request_failed", duration_ms=_elapsed_ms(started))
            raise

        # 4xx 是任务资源的正常结果（422 / 404），只有 5xx 升级为 warning
        emit = log.awarning if response.status_code >= 500 else log.ainfo
        await emit(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
