"""Taskboard Client -- 任务 API 客户端与本地状态对账

packages/client 的公开接口导出。
"""

from .client import TaskApiClient
from .config import ClientConfig, load_client_config
from .controller import TaskController
from .exceptions import TaskClientError, TransportError, UnexpectedResponseError
from .state import TaskListState

__all__ = [
    "TaskApiClient",
    "TaskController",
    "TaskListState",
    "ClientConfig",
    "load_client_config",
    "TaskClientError",
    "TransportError",
    "UnexpectedResponseError",
]
