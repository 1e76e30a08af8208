"""Recycle Score Domain Constants."""

from __future__ import annotations

# 점수 집계 대상 라벨 (AutoML 모델 displayName)
RECYCLABLE_LABELS: frozenset[str] = frozenset({"glass", "plastic", "metal"})

# 검출 신뢰도가 이 값을 "초과"해야 점수에 포함됨
CONFIDENCE_THRESHOLD = 0.5

# 제출 기록이 저장되는 컬렉션
SUBMISSIONS_COLLECTION = "addresses"

DEFAULT_PAGE_SKIP = 0
DEFAULT_PAGE_LIMIT = 10
