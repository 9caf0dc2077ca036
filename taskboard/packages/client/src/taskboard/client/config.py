"""ClientConfig -- Client 配置加载

从环境变量加载配置，不硬编码 API 地址。
"""

import os

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

DEFAULT_TIMEOUT_S = 10


class ClientConfig(BaseModel):
    """Client 包配置 -- 从环境变量加载

    环境变量:
        TASKBOARD_API_URL: 任务 API 基础地址（含 API 前缀）
        TASKBOARD_API_TIMEOUT_S: 单次请求超时（秒，默认 10）
    """

    base_url: str = Field(
        default="http://localhost:8000/api",
        description="任务 API 基础 URL（含 API 前缀）",
    )
    timeout_s: float = Field(
        default=DEFAULT_TIMEOUT_S,
        gt=0,
        description="单次请求超时（秒）",
    )


def load_client_config() -> ClientConfig:
    """从环境变量加载 Client 配置

    环境变量映射:
        TASKBOARD_API_URL -> base_url (默认 "http://localhost:8000/api")
        TASKBOARD_API_TIMEOUT_S -> timeout_s (默认 10)

    Returns:
        ClientConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKBOARD_API_URL"):
        kwargs["base_url"] = val

    if val := os.environ.get("TASKBOARD_API_TIMEOUT_S"):
        try:
            timeout_s = float(val)
            if timeout_s <= 0:
                raise ValueError(val)
            kwargs["timeout_s"] = timeout_s
        except ValueError:
            log.warning(
                "invalid_timeout_config",
                env_var="TASKBOARD_API_TIMEOUT_S",
                value=val,
                fallback=DEFAULT_TIMEOUT_S,
            )

    return ClientConfig(**kwargs)
