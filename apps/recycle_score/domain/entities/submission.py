"""Submission Entity."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class Submission:
    """주소별 이미지 점수 제출 기록.

    한 번 생성되면 수정/삭제되지 않습니다.

    Attributes:
        address: 제출 주소 (집계 키, 문자열 완전 일치)
        score: 재활용 검출 개수 (0 이상)
        result: AutoML 원본 응답 (가공 없이 저장)
        timestamp: 생성 시각 (epoch milliseconds)
    """

    address: str
    score: int
    result: list[dict[str, Any]]
    timestamp: int = field(default_factory=_now_ms)

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"score must be non-negative, got {self.score}")

    def to_document(self) -> dict[str, Any]:
        """MongoDB 문서로 변환."""
        return {
            "address": self.address,
            "timestamp": self.timestamp,
            "score": self.score,
            "result": self.result,
        }
