"""Addresses API Controller.

- GET /addresses?skip=&limit=: 주소별 누적 점수 조회
- 그 외 메서드: 404 "Use a GET instead!"
"""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from recycle_score.application.history.queries import ListAddressesRequest
from recycle_score.setup.dependencies import ListAddressesQueryDep

router = APIRouter(tags=["addresses"])

NON_GET_METHODS = ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.get(
    "/addresses",
    summary="List per-address score totals",
    responses={
        200: {"description": "[{address, totalScore, count}, ...]"},
        404: {"description": "GET 이외의 메서드"},
        500: {"description": "MongoDB 실패 ({error})"},
    },
)
async def list_addresses(
    query: ListAddressesQueryDep,
    skip: str | None = Query(None, description="건너뛸 주소 수 (기본 0)"),
    limit: str | None = Query(None, description="최대 주소 수 (기본 10)"),
) -> JSONResponse:
    """주소별 점수 합계와 제출 횟수를 반환합니다.

    정렬하지 않으므로 순서는 저장소 집계 순서를 따릅니다.
    """
    request = ListAddressesRequest.from_query(skip=skip, limit=limit)
    aggregates = await query.execute(request)
    return JSONResponse(status_code=200, content=[agg.to_dict() for agg in aggregates])


@router.api_route("/addresses", methods=NON_GET_METHODS, include_in_schema=False)
async def addresses_wrong_method() -> PlainTextResponse:
    return PlainTextResponse("Use a GET instead!", status_code=404)
