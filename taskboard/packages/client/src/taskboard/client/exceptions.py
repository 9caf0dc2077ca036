"""Client 异常体系

服务端的 422 / 404 映射回 taskboard.core.exceptions 中的同名类型，
此处只定义客户端独有的失败：连不上 API，或 API 返回了契约之外的响应。
"""


class TaskClientError(Exception):
    """Client 包基础异常"""

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 调用方重新触发操作是否有可能成功
        """
        super().__init__(message)
        self.recoverable = recoverable


class TransportError(TaskClientError):
    """API 不可达（连接失败、超时、DNS 解析失败等）

    不会自动重试，由调用方决定是否重新触发。
    """

    def __init__(self, base_url: str, original_error: Exception) -> None:
        """
        Args:
            base_url: 尝试连接的 API 地址
            original_error: 原始异常
        """
        super().__init__(
            f"Task API unreachable: {base_url} -- {original_error}",
            recoverable=True,
        )
        self.base_url = base_url
        self.original_error = original_error


class UnexpectedResponseError(TaskClientError):
    """API 返回了契约之外的状态码或无法解析的响应体"""

    def __init__(self, status_code: int, detail: str = "") -> None:
        message = f"Unexpected response from task API: HTTP {status_code}"
        if detail:
            message = f"{message} -- {detail}"
        super().__init__(message, recoverable=status_code >= 500)
        self.status_code = status_code
