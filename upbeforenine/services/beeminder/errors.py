"""
Beeminder API 异常定义
"""
from typing import Optional


class BeeminderAPIError(Exception):
    """
    Beeminder 返回非 200 时抛出的统一异常。

    网络层异常（httpx.TransportError）不会被转换为该类型。
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def is_refusal(self) -> bool:
        """4xx / 5xx：客户端或服务端拒绝了请求。"""
        return self.status_code is not None and 400 <= self.status_code < 600
