from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

CUTOFF_HOUR = 9
EARLY_PRESS_HOURS = 4


@dataclass(frozen=True)
class InvocationClock:
    """
    单次调用的“当前时间”。

    每次调用只捕获一次，之后所有与时间相关的计算（daystamp、距 9 点的分钟数、
    是否周末）都基于同一个值，避免执行过程中时间推移导致结果不一致。
    """

    now: datetime

    @classmethod
    def capture(cls, tz_name: Optional[str] = None) -> "InvocationClock":
        if tz_name:
            return cls(now=datetime.now(ZoneInfo(tz_name)))
        return cls(now=datetime.now().astimezone())

    @property
    def daystamp(self) -> str:
        return self.now.strftime("%Y%m%d")

    @property
    def minutes_before_nine(self) -> float:
        """
        当天本地 9:00 减去当前时间（分钟，可为负数）。

        两个 datetime 共用同一个 tzinfo，相减按墙上时间计算，不受夏令时偏移影响。
        """
        nine_am = self.now.replace(hour=CUTOFF_HOUR, minute=0, second=0, microsecond=0)
        return (nine_am - self.now).total_seconds() / 60

    @property
    def is_before_five_am(self) -> bool:
        return self.minutes_before_nine / 60 > EARLY_PRESS_HOURS

    @property
    def is_weekend(self) -> bool:
        # Monday=0 ... Saturday=5, Sunday=6
        return self.now.weekday() >= 5

    @property
    def datapoint_value(self) -> int:
        value = math.ceil(self.minutes_before_nine)
        return max(0, value) if self.is_weekend else value
