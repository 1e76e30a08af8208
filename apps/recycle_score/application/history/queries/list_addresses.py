"""List Addresses Query.

주소별 누적 점수를 페이지 단위로 조회하는 Query입니다.
skip/limit은 숫자로만 변환하고 범위는 검증하지 않습니다 (저장소에 그대로 전달).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from recycle_score.application.common.exceptions import AddressHistoryError, UpstreamError
from recycle_score.domain.constants import DEFAULT_PAGE_LIMIT, DEFAULT_PAGE_SKIP
from recycle_score.domain.value_objects import AddressAggregate

if TYPE_CHECKING:
    from recycle_score.application.history.ports import AddressAggregateReader

logger = logging.getLogger(__name__)

# BSON int64 범위
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def coerce_page_param(raw: str | None, default: int) -> int | float:
    """쿼리 파라미터를 숫자로 변환.

    - None / 빈 문자열 → default
    - 정수 표현 → int, 그 외 숫자 표현 → float (정수값이면 int)
    - int64 범위를 벗어나는 정수 → float
    - 숫자가 아니면 NaN
    """
    if raw is None or raw == "":
        return default
    try:
        number = int(raw)
    except ValueError:
        pass
    else:
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
        return float(raw)
    try:
        value = float(raw)
    except ValueError:
        return math.nan
    if math.isfinite(value) and value.is_integer() and _INT64_MIN <= value <= _INT64_MAX:
        return int(value)
    return value


@dataclass
class ListAddressesRequest:
    """주소 집계 조회 요청 DTO."""

    skip: int | float = DEFAULT_PAGE_SKIP
    limit: int | float = DEFAULT_PAGE_LIMIT

    @classmethod
    def from_query(cls, skip: str | None, limit: str | None) -> ListAddressesRequest:
        """쿼리 문자열 값에서 DTO 생성."""
        return cls(
            skip=coerce_page_param(skip, DEFAULT_PAGE_SKIP),
            limit=coerce_page_param(limit, DEFAULT_PAGE_LIMIT),
        )


class ListAddressesQuery:
    """주소별 누적 점수 조회 Query."""

    def __init__(self, reader: "AddressAggregateReader") -> None:
        """Initialize.

        Args:
            reader: 주소 집계 조회 Port
        """
        self._reader = reader

    async def execute(self, request: ListAddressesRequest) -> list[AddressAggregate]:
        """주소별 집계를 조회합니다.

        Raises:
            AddressHistoryError: 연결 또는 aggregate 실패
        """
        try:
            aggregates = await self._reader.aggregate_by_address(
                skip=request.skip,
                limit=request.limit,
            )
        except UpstreamError as exc:
            logger.error(
                "address_history_failed",
                extra={
                    "stage": exc.location or "aggregate",
                    "skip": request.skip,
                    "limit": request.limit,
                    "error": exc.message,
                },
            )
            raise AddressHistoryError(exc.cause) from exc

        logger.info(
            "address_history_listed",
            extra={"skip": request.skip, "limit": request.limit, "results_count": len(aggregates)},
        )
        return list(aggregates)
