"""Address Aggregate Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from recycle_score.domain.value_objects import AddressAggregate


class AddressAggregateReader(ABC):
    """주소별 집계 조회 Port.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def aggregate_by_address(
        self,
        skip: int | float,
        limit: int | float,
    ) -> Sequence[AddressAggregate]:
        """주소별 점수 합계/제출 수를 조회합니다.

        Args:
            skip: 건너뛸 집계 수 (범위 검증 없음)
            limit: 최대 집계 수 (범위 검증 없음)

        Returns:
            저장소 그룹핑 순서의 집계 목록

        Raises:
            UpstreamError: 연결 또는 aggregate 실패
        """
        ...
