"""Address Aggregate Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class AddressAggregate:
    """주소별 누적 점수 집계.

    Attributes:
        address: 주소
        total_score: 해당 주소 제출 점수 합계
        count: 해당 주소 제출 횟수
    """

    address: str
    total_score: int
    count: int

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> AddressAggregate:
        """aggregate 결과 문서({address, totalScore, count})에서 생성."""
        return cls(
            address=data.get("address"),
            total_score=data.get("totalScore", 0),
            count=data.get("count", 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """응답 형식({address, totalScore, count})으로 변환."""
        return {
            "address": self.address,
            "totalScore": self.total_score,
            "count": self.count,
        }
