from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATAPOINT_COMMENT = "via MyStrom Button"


class Settings(BaseSettings):
    """
    全局配置，从环境变量 / .env 中读取。
    """

    # Beeminder 配置
    BEEMINDER_TOKEN: str
    BEEMINDER_USERNAME: str = "dwarvensphere"
    BEEMINDER_GOAL: str = "upbeforenine"
    BEEMINDER_BASE_URL: str = "https://www.beeminder.com"
    BEEMINDER_TIMEOUT_S: float = 20.0

    # 数据点备注
    DATAPOINT_COMMENT: str = DEFAULT_DATAPOINT_COMMENT

    # 时区：为空时使用进程所在环境的本地时间
    LOCAL_TIMEZONE: str | None = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOCAL_TIMEZONE")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        # 启动时即校验时区名，避免每次按钮触发才失败
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone: {value}") from exc
        return value


@lru_cache
def get_settings() -> Settings:
    """
    获取全局单例配置实例。
    """
    return Settings()
