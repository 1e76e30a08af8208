"""Score Extractor.

AutoML object detection 응답에서 재활용 검출 개수를 계산하는 순수 함수.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from recycle_score.domain.constants import CONFIDENCE_THRESHOLD, RECYCLABLE_LABELS


def is_qualifying_detection(item: Mapping[str, Any]) -> bool:
    """라벨이 허용 목록에 있고 신뢰도가 임계값을 초과하는지 확인."""
    if item.get("displayName") not in RECYCLABLE_LABELS:
        return False
    detection = item.get("imageObjectDetection") or {}
    score = detection.get("score")
    return score is not None and score > CONFIDENCE_THRESHOLD


def extract_score(results: Iterable[Mapping[str, Any] | None] | None) -> int:
    """모든 result의 payload를 순회하며 조건을 만족하는 검출 수를 센다.

    Args:
        results: AutoML predict 응답 목록 (None/빈 목록 허용)

    Returns:
        재활용 검출 개수 (0 이상)
    """
    if not results:
        return 0

    count = 0
    for result in results:
        if not result:
            continue
        for item in result.get("payload") or ():
            if is_qualifying_detection(item):
                count += 1
    return count
