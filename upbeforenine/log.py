import logging
import sys

AUDIT_LOGGER = "upbeforenine.core.handler"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    统一日志配置：输出到 stdout，作为按钮触发的审计日志。

    Lambda 运行时会预先挂载 handler，因此使用 force=True 覆盖。
    按钮结果日志固定为 INFO，不受 LOG_LEVEL 影响。
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(AUDIT_LOGGER).setLevel(logging.INFO)
