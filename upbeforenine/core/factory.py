from __future__ import annotations

from functools import partial
from typing import Optional

import httpx

from upbeforenine.config import Settings
from upbeforenine.core.clock import InvocationClock
from upbeforenine.core.handler import TriggerHandler
from upbeforenine.services.beeminder import BeeminderClient


def build_trigger_handler(
    settings: Settings, *, transport: Optional[httpx.BaseTransport] = None
) -> TriggerHandler:
    """
    根据配置组装 Beeminder 客户端与触发处理器。
    """
    return TriggerHandler(
        client=BeeminderClient.from_settings(settings, transport=transport),
        comment=settings.DATAPOINT_COMMENT,
        clock_factory=partial(InvocationClock.capture, settings.LOCAL_TIMEZONE),
    )
