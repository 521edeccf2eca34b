"""
测试用的 Beeminder 假服务：基于 httpx.MockTransport，记录所有请求。
"""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, List
from zoneinfo import ZoneInfo

import httpx

from upbeforenine.core.clock import InvocationClock
from upbeforenine.core.handler import TriggerHandler
from upbeforenine.services.beeminder import BeeminderClient

TOKEN = "token"
DATAPOINTS_PATH = "/api/v1/users/dwarvensphere/goals/upbeforenine/datapoints.json"
BAD_TOKEN_BODY = (
    '{"errors":{"auth_token":"bad_token","message":"No such auth_token found. '
    '(Did you mix up auth_token and access_token?)"}}'
)
LONDON = ZoneInfo("Europe/London")


def london_clock(*args: int) -> InvocationClock:
    return InvocationClock(now=datetime(*args, tzinfo=LONDON))


class FakeBeeminder:
    def __init__(self, datapoints: List[Dict[str, Any]] | None = None) -> None:
        self.datapoints = list(
            datapoints
            if datapoints is not None
            else [{"value": 10.0, "id": "0" * 24, "daystamp": "20230401"}]
        )
        self.get_status = 200
        self.get_body: str | None = None
        self.post_status = 200
        self.post_body: str | None = None
        self.requests: List[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def methods(self) -> List[str]:
        return [r.method for r in self.requests]

    @property
    def posted(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.method == "POST"]

    def client(self) -> BeeminderClient:
        return BeeminderClient(
            auth_token=TOKEN,
            username="dwarvensphere",
            goal="upbeforenine",
            transport=self.transport,
        )

    def handler(self) -> TriggerHandler:
        return TriggerHandler(client=self.client())

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            if self.get_status != 200:
                return httpx.Response(self.get_status, text=self.get_body or "")
            return httpx.Response(200, json=self.datapoints)

        if self.post_status != 200:
            return httpx.Response(self.post_status, text=self.post_body or "")
        payload = json.loads(request.content)
        record = {
            "value": float(payload["value"]),
            "id": "1" * 24,
            "daystamp": payload["daystamp"],
        }
        self.datapoints.append(record)
        return httpx.Response(200, json=record)
