import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, settings
from .api import system, tasks
from .storage.task_store import TaskStore

# 配置日志
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动时初始化
    app_settings: Settings = app.state.settings
    logger.info(f"🚀 {app_settings.app_name} 启动")
    logger.info(f"🔌 Port: {app_settings.port}")
    logger.info(f"📋 Tasks: {app.state.task_store.count()}")
    yield
    # 关闭时清理（内存存储随进程退出释放）
    logger.info(f"👋 {app_settings.app_name} 关闭")


def create_app(store: Optional[TaskStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """
    创建应用实例

    Args:
        store: 任务存储，未提供时新建一个空存储
        app_settings: 服务配置，未提供时使用全局配置

    Returns:
        配置好路由和异常处理的 FastAPI 应用
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="内存任务管理服务，提供任务的增删改查接口",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = app_settings
    app.state.task_store = store if store is not None else TaskStore()

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 请求参数（路径 id、请求体）解析失败统一返回 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"请求参数无效: {request.method} {request.url.path}, 错误: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # 路由注册
    app.include_router(system.router)
    app.include_router(tasks.router)

    return app


app = create_app()


def run():
    """启动服务（单进程，内存存储不跨进程共享）"""
    import uvicorn
    uvicorn.run(
        "taskhub.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
