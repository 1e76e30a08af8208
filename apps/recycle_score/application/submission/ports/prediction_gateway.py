"""Prediction Gateway Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PredictionGateway(ABC):
    """외부 이미지 object detection 서비스 Port.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def predict(self, image_b64: str) -> list[dict[str, Any]]:
        """base64 이미지를 모델에 제출하고 원본 응답 목록을 반환.

        Args:
            image_b64: base64 인코딩된 이미지

        Returns:
            응답 목록. 각 원소는 payload 항목 목록을 포함
            ({"payload": [{"displayName": ..., "imageObjectDetection": {"score": ...}}]})

        Raises:
            PredictionServiceError: 서비스 호출 실패
        """
        ...

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
