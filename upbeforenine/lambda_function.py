"""
AWS Lambda 入口：按钮通过 Lambda URL / API Gateway 触发。
"""
from __future__ import annotations

from typing import Any, Dict

from upbeforenine.config import get_settings
from upbeforenine.core.factory import build_trigger_handler
from upbeforenine.log import configure_logging


def lambda_handler(event: Any, context: Any) -> Dict[str, Any]:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    handler = build_trigger_handler(settings)
    try:
        outcome = handler.handle(event, context)
    finally:
        handler.close()
    return outcome.to_dict()
