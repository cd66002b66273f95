"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from config.settings import settings
from src.shop_common.database import engine
from src.shop_common.errors import AppError, InternalError
from src.shop_common.response import error_response
from src.shop_coupon.api.router import router as coupon_router
from src.shop_gateway.middleware.request_log import RequestLogMiddleware
from src.shop_order.api.router import router as order_router
from src.shop_product.api.router import router as product_router
from src.shop_withdraw.api.router import router as withdraw_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify the DB connection. Shutdown: dispose the pool."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("%s started", settings.APP_NAME)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


def _error_json(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_json(request, exc)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_json(request, InternalError())


app.include_router(product_router, prefix="/api/v1")
app.include_router(coupon_router, prefix="/api/v1")
app.include_router(order_router, prefix="/api/v1")
app.include_router(withdraw_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
