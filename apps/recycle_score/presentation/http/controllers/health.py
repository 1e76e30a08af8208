"""Health Check Controller."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from recycle_score.application.common.exceptions import UpstreamError
from recycle_score.setup.dependencies import ConnectionProviderDep, SettingsDep

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health")
async def health(settings: SettingsDep) -> dict:
    """서비스 헬스 체크."""
    return {
        "status": "ok",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def ready(provider: ConnectionProviderDep) -> JSONResponse:
    """서비스 준비 상태 체크 (MongoDB ping)."""
    try:
        await provider.ping()
    except UpstreamError as exc:
        logger.warning("readiness_check_failed", extra={"error": exc.message})
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "detail": exc.message},
        )
    return JSONResponse(status_code=200, content={"status": "ready"})
