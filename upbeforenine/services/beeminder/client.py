"""
Beeminder API 客户端

封装目标（goal）数据点的查询与写入，负责认证参数注入、请求日志和错误处理。
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from upbeforenine.config import Settings
from upbeforenine.services.beeminder.errors import BeeminderAPIError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _mask(token: str) -> str:
    # 前4后4打码
    return f"{token[:4]}...{token[-4:]}" if len(token) > 8 else "***"


class BeeminderClient:
    """
    Beeminder 同步客户端

    - auth_token 在构造时注入，不在内部读取环境变量
    - transport 可替换（测试中使用 httpx.MockTransport）
    """

    def __init__(
        self,
        *,
        auth_token: str,
        username: str,
        goal: str,
        base_url: str = "https://www.beeminder.com",
        timeout_s: float = 20.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._token = auth_token
        self.username = username
        self.goal = goal
        self._client = httpx.Client(
            base_url=base_url, timeout=timeout_s, transport=transport
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: Optional[httpx.BaseTransport] = None
    ) -> "BeeminderClient":
        return cls(
            auth_token=settings.BEEMINDER_TOKEN,
            username=settings.BEEMINDER_USERNAME,
            goal=settings.BEEMINDER_GOAL,
            base_url=settings.BEEMINDER_BASE_URL,
            timeout_s=settings.BEEMINDER_TIMEOUT_S,
            transport=transport,
        )

    @property
    def datapoints_path(self) -> str:
        return f"/api/v1/users/{self.username}/goals/{self.goal}/datapoints.json"

    def list_datapoints(self) -> List[Dict[str, Any]]:
        """
        获取目标下所有已记录的数据点。
        """
        return self.request(
            "GET", self.datapoints_path, params={"auth_token": self._token}
        )

    def has_datapoint_for(self, daystamp: str) -> bool:
        return any(dp.get("daystamp") == daystamp for dp in self.list_datapoints())

    def create_datapoint(
        self, *, daystamp: str, value: int, comment: str
    ) -> Dict[str, Any]:
        """
        写入一个数据点，请求体为 JSON：auth_token / comment / daystamp / value。
        """
        payload = {
            "auth_token": self._token,
            "comment": comment,
            "daystamp": daystamp,
            "value": value,
        }
        return self.request("POST", self.datapoints_path, json=payload)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        发送请求到 Beeminder API。

        非 200 响应抛出 BeeminderAPIError；网络异常与非法 JSON 原样向上抛出。
        """
        logger.info(
            "Beeminder API Request: %s %s (auth_token=%s)",
            method,
            path,
            _mask(self._token),
        )
        resp = self._client.request(
            method,
            path,
            params=params,
            json=json,
            headers=JSON_HEADERS if json is not None else None,
        )
        logger.info(
            "Beeminder API Response: %s %s -> status=%s",
            method,
            path,
            resp.status_code,
        )

        if resp.status_code != 200:
            raise BeeminderAPIError(
                f"Beeminder API error path={path}, status={resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )
        return resp.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BeeminderClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
