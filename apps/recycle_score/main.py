"""Recycle Score API Main Application.

엔드포인트:
- POST /api/v1/score: 이미지 재활용 점수 산정 및 저장
- GET /api/v1/addresses: 주소별 누적 점수 조회
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recycle_score.presentation.http.controllers import (
    addresses_router,
    health_router,
    score_router,
)
from recycle_score.presentation.http.errors import register_exception_handlers
from recycle_score.setup.config import get_settings
from recycle_score.setup.dependencies import close_prediction_gateway
from recycle_score.setup.logging import configure_logging
from recycle_score.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_pymongo,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)
settings = get_settings()

# 구조화된 로깅 설정 (ECS JSON 포맷)
configure_logging(service_name=settings.service_name, service_version=settings.service_version)

# OpenTelemetry 분산 트레이싱 설정
configure_tracing(settings)
instrument_pymongo(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI 라이프스팬 이벤트."""
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    yield
    logger.info(f"Shutting down {settings.service_name}")
    await close_prediction_gateway()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    app = FastAPI(
        title="Recycle Score API",
        description="Recyclable content scoring and per-address history",
        version=settings.service_version,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app, settings)

    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(score_router, prefix="/api/v1")
    app.include_router(addresses_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
