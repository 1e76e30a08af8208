"""Exception Handlers.

애플리케이션/외부 서비스 예외를 HTTP 응답으로 변환합니다.
- ApplicationError → 400 (plain text)
- UpstreamError → 500 ({error[, location]})
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from recycle_score.application.common.exceptions import ApplicationError, UpstreamError

logger = logging.getLogger(__name__)


def describe_error(cause: BaseException) -> dict[str, Any]:
    """외부 예외를 JSON 직렬화 가능한 형태로 변환."""
    described: dict[str, Any] = {
        "type": type(cause).__name__,
        "message": str(cause),
    }
    code = getattr(cause, "code", None)
    if isinstance(code, int) and not isinstance(code, bool):
        described["code"] = int(code)
    return described


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error(
            "upstream_error",
            extra={
                "path": request.url.path,
                "location": exc.location,
                "error_type": type(exc.cause).__name__,
                "error": exc.message,
            },
        )
        content: dict[str, Any] = {"error": describe_error(exc.cause)}
        if exc.location is not None:
            content["location"] = exc.location
        return JSONResponse(status_code=500, content=content)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return PlainTextResponse(exc.message, status_code=400)
