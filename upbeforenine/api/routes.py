from __future__ import annotations

import logging
from typing import Dict, Iterator

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from upbeforenine.config import get_settings
from upbeforenine.core.factory import build_trigger_handler
from upbeforenine.core.handler import TriggerHandler

logger = logging.getLogger(__name__)

router = APIRouter()


class ButtonPressResponse(BaseModel):
    status_code: int
    message: str


def get_trigger_handler() -> Iterator[TriggerHandler]:
    """
    每次请求构建独立的处理器，请求结束后关闭 HTTP 连接。
    """
    handler = build_trigger_handler(get_settings())
    try:
        yield handler
    finally:
        handler.close()


@router.get("/ping", summary="简单连通性测试")
def ping() -> Dict[str, str]:
    return {"message": "pong"}


@router.api_route(
    "/button/press",
    methods=["GET", "POST"],
    summary="按钮触发：向 Beeminder 写入今日数据点",
    response_model=ButtonPressResponse,
)
def press_button(
    handler: TriggerHandler = Depends(get_trigger_handler),
) -> JSONResponse:
    logger.info("Button press received")
    # myStrom 按钮的请求体没有业务含义，仅作为触发信号
    outcome = handler.handle()
    return JSONResponse(
        status_code=outcome.status_code,
        content=ButtonPressResponse(
            status_code=outcome.status_code, message=outcome.message
        ).model_dump(),
    )
