"""
FastAPI 应用主入口
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from todo_app.config import get_settings
from todo_app.observability.logging_config import setup_logging
from todo_app.observability.metrics_middleware import MetricsMiddleware
from todo_app.observability.request_logger import RequestLoggerMiddleware, get_trace_id
from todo_app.store import InvalidPayloadError, UnknownActionError
from todo_app.todo import create_todo_store

settings = get_settings()

# 初始化日志（在 import 时就生效）
setup_logging(env=settings.ENV, level=settings.LOG_LEVEL)
log = structlog.get_logger()


@asynccontextmanager
async def lifespan(application: FastAPI):
    """应用生命周期：启动时创建 Store（种子状态），关闭时丢弃"""
    application.state.store = create_todo_store(settings.TODO_SEED_TEXT)
    log.info("应用启动", env=settings.ENV, app=settings.APP_NAME)

    yield

    # 状态只在内存中，重启即回到种子条目
    del application.state.store
    log.info("应用关闭，Store 已释放")


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

# ── 中间件（执行顺序：从下往上注册，从上往下执行） ──
app.add_middleware(RequestLoggerMiddleware)
app.add_middleware(MetricsMiddleware)

# ── Prometheus 指标端点 ──
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)


# ── 异常处理：Action 非法统一转 422 ──

@app.exception_handler(UnknownActionError)
async def unknown_action_handler(request: Request, exc: UnknownActionError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "trace_id": get_trace_id()},
    )


@app.exception_handler(InvalidPayloadError)
async def invalid_payload_handler(request: Request, exc: InvalidPayloadError):
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors), "trace_id": get_trace_id()},
    )


# ── 路由注册 ──
from todo_app.api.health import router as health_router
from todo_app.api.todos import router as todos_router

app.include_router(health_router)
app.include_router(todos_router)


if __name__ == "__main__":
    import uvicorn
    # 允许直接运行 python -m todo_app.main 启动服务
    uvicorn.run("todo_app.main:app", host="0.0.0.0", port=settings.APP_PORT, reload=True)
