from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from upbeforenine.config import DEFAULT_DATAPOINT_COMMENT
from upbeforenine.core.clock import InvocationClock
from upbeforenine.services.beeminder import BeeminderAPIError, BeeminderClient

logger = logging.getLogger(__name__)

ClockFactory = Callable[[], InvocationClock]


@dataclass
class OutcomeResponse:
    """
    单次触发的结果：200 表示已写入，422 表示被业务规则或 Beeminder 拒绝。
    """

    status_code: int
    message: str

    @property
    def body(self) -> str:
        return json.dumps(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"statusCode": self.status_code, "body": self.body}


class TriggerHandler:
    """
    按钮触发处理：时间窗口校验 -> 查重 -> 计算数据点 -> 写入 Beeminder。

    每一步命中规则即返回，所有结果同时写入日志。
    """

    def __init__(
        self,
        *,
        client: BeeminderClient,
        comment: str = DEFAULT_DATAPOINT_COMMENT,
        clock_factory: ClockFactory = InvocationClock.capture,
    ) -> None:
        self._client = client
        self._comment = comment
        self._clock_factory = clock_factory

    def handle(
        self,
        event: Any = None,
        context: Any = None,
        *,
        clock: Optional[InvocationClock] = None,
    ) -> OutcomeResponse:
        _ = event  # 按钮请求体没有业务含义，仅作为触发信号
        _ = context
        clock = clock or self._clock_factory()

        try:
            if clock.is_before_five_am:
                return self._respond(422, "Button pressed before 5AM")

            if self._client.has_datapoint_for(clock.daystamp):
                return self._respond(
                    422, f'Datapoint for "{clock.daystamp}" already exists'
                )

            value = clock.datapoint_value
            self._client.create_datapoint(
                daystamp=clock.daystamp, value=value, comment=self._comment
            )
            return self._respond(200, f"Sent datapoint '{value}' to Beeminder!")
        except BeeminderAPIError as exc:
            if not exc.is_refusal:
                raise
            logger.error("%s: %s", exc.status_code, exc.body)
            return self._respond(422, "Request refused by Beeminder")

    def close(self) -> None:
        self._client.close()

    def _respond(self, status_code: int, message: str) -> OutcomeResponse:
        logger.info(message)
        return OutcomeResponse(status_code=status_code, message=message)
