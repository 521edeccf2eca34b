from fastapi import FastAPI

from upbeforenine.config import get_settings
from upbeforenine.log import configure_logging
from dotenv import load_dotenv

load_dotenv()

from upbeforenine.api.routes import router as api_router


def create_app() -> FastAPI:
    """
    创建 FastAPI 应用，并挂载路由。
    """
    app = FastAPI(
        title="Up Before Nine Button",
        version="0.1.0",
    )

    # 预加载配置，缺少 BEEMINDER_TOKEN 时启动即报错
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app.include_router(api_router, prefix="/api")

    @app.get("/health", summary="健康检查")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
