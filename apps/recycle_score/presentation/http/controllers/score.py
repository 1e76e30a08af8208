"""Score API Controller.

- POST /score: 이미지 점수 산정 및 주소별 기록 저장
- 그 외 메서드: 404 "Use a POST instead!"
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from recycle_score.application.submission.commands import SubmitScoreRequest
from recycle_score.setup.dependencies import SubmitScoreCommandDep

router = APIRouter(tags=["score"])
logger = logging.getLogger(__name__)

NON_POST_METHODS = ["GET", "PUT", "PATCH", "DELETE", "OPTIONS"]


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class ScoreSubmitBody(BaseModel):
    """점수 제출 요청 스키마 (문서용, 검증은 존재 여부만 수행)."""

    address: str = Field(description="제출 주소")
    image: str = Field(description="base64 인코딩 이미지")


class ScoreResponse(BaseModel):
    """점수 제출 응답 스키마."""

    score: int = Field(description="재활용 검출 개수")
    result: list[dict[str, Any]] = Field(description="AutoML 원본 응답")


async def _read_json_body(request: Request) -> Any:
    """요청 본문을 JSON으로 파싱 (없거나 파싱 불가면 None)."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "/score",
    status_code=201,
    response_model=ScoreResponse,
    summary="Score an image for recyclable content",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ScoreSubmitBody.model_json_schema()}},
            "required": True,
        }
    },
    responses={
        400: {"description": "본문 또는 address/image 누락"},
        404: {"description": "POST 이외의 메서드"},
        500: {"description": "AutoML/MongoDB 실패 ({error, location})"},
    },
)
async def submit_score(request: Request, command: SubmitScoreCommandDep) -> ScoreResponse:
    """이미지의 재활용 검출 수를 계산하고 주소별로 저장합니다."""
    body = await _read_json_body(request)
    score_request = SubmitScoreRequest.from_body(body)

    response = await command.execute(score_request)

    return ScoreResponse(score=response.score, result=response.result)


@router.api_route("/score", methods=NON_POST_METHODS, include_in_schema=False)
async def score_wrong_method() -> PlainTextResponse:
    return PlainTextResponse("Use a POST instead!", status_code=404)
