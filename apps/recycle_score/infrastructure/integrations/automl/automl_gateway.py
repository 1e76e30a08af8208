"""Google Cloud AutoML Vision Prediction Gateway.

Object detection 모델에 base64 이미지를 제출하고 원본 응답을 반환합니다.

요청:
- name: projects/{project}/locations/{region}/models/{model}
- payload.image.image_bytes: 디코딩된 이미지 바이트

응답:
- REST/JSON 필드명(camelCase)으로 변환한 PredictResponse 1건을 담은 목록
- 이미지 크기/형식 검증은 하지 않음 (서비스 오류로 전달)
- base64 디코딩 실패 (비 ASCII 포함)도 예측 실패로 보고
"""

from __future__ import annotations

import base64
import logging
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import automl

from recycle_score.application.common.exceptions import PredictionServiceError
from recycle_score.application.submission.ports import PredictionGateway

logger = logging.getLogger(__name__)


class AutoMLPredictionGateway(PredictionGateway):
    """AutoML PredictionService 클라이언트 래퍼.

    클라이언트는 첫 호출 시 생성되며 요청 간 공유됩니다 (호출당 무상태).
    """

    def __init__(
        self,
        project: str,
        region: str,
        model_id: str,
        client: automl.PredictionServiceAsyncClient | None = None,
    ) -> None:
        """초기화.

        Args:
            project: GCP 프로젝트
            region: 모델 리전
            model_id: AutoML 모델 ID
            client: PredictionService 클라이언트 (외부 주입, 미지정 시 lazy 생성)
        """
        self._project = project
        self._region = region
        self._model_id = model_id
        self._client = client

    @property
    def model_path(self) -> str:
        return automl.PredictionServiceAsyncClient.model_path(
            self._project, self._region, self._model_id
        )

    def _get_client(self) -> automl.PredictionServiceAsyncClient:
        if self._client is None:
            self._client = automl.PredictionServiceAsyncClient()
        return self._client

    async def predict(self, image_b64: str) -> list[dict[str, Any]]:
        """이미지를 모델에 제출하고 원본 응답 목록을 반환."""
        try:
            client = self._get_client()
            payload = automl.ExamplePayload(
                image=automl.Image(image_bytes=base64.b64decode(image_b64)),
            )
            response = await client.predict(name=self.model_path, payload=payload)
        except (GoogleAPIError, GoogleAuthError, ValueError, TypeError) as exc:
            logger.error(
                "automl_predict_failed",
                extra={"model_path": self.model_path, "error": str(exc)},
            )
            raise PredictionServiceError(exc) from exc

        result = automl.PredictResponse.to_dict(response, preserving_proto_field_name=False)
        logger.debug(
            "automl_predict_completed",
            extra={"model_path": self.model_path, "payload_count": len(result.get("payload", []))},
        )
        return [result]

    async def close(self) -> None:
        """gRPC 채널 종료."""
        if self._client is not None:
            await self._client.transport.close()
            self._client = None
