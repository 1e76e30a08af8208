"""Submit Score Command - 이미지 점수 산정 및 저장.

Workflow:
    validate → predict → score → persist → respond
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from recycle_score.application.common.exceptions import (
    BodyMissingError,
    SubmissionFormatError,
)
from recycle_score.application.submission.ports import PredictionGateway, SubmissionWriter
from recycle_score.domain.entities import Submission
from recycle_score.domain.services import extract_score

logger = logging.getLogger(__name__)


@dataclass
class SubmitScoreRequest:
    """점수 제출 요청 DTO."""

    address: str
    image: str

    @classmethod
    def from_body(cls, body: Any) -> SubmitScoreRequest:
        """요청 본문에서 DTO 생성 (존재 여부만 검사).

        Raises:
            BodyMissingError: 본문 없음
            SubmissionFormatError: address 또는 image 누락
        """
        if body is None:
            raise BodyMissingError()
        if not isinstance(body, dict):
            raise SubmissionFormatError()
        if body.get("address") is None or body.get("image") is None:
            raise SubmissionFormatError()
        return cls(address=body["address"], image=body["image"])


@dataclass
class SubmitScoreResponse:
    """점수 제출 응답 DTO."""

    score: int
    result: list[dict[str, Any]]


class SubmitScoreCommand:
    """이미지 점수 제출 Command.

    AutoML 예측 결과에서 재활용 검출 수를 계산하고
    원본 응답과 함께 주소별 기록으로 저장합니다.
    실패 시 재시도/롤백 없이 UpstreamError를 그대로 전파합니다.
    """

    def __init__(
        self,
        prediction_gateway: PredictionGateway,
        submission_writer: SubmissionWriter,
    ) -> None:
        """초기화.

        Args:
            prediction_gateway: AutoML 예측 Port
            submission_writer: 제출 기록 저장 Port
        """
        self._gateway = prediction_gateway
        self._writer = submission_writer

    async def execute(self, request: SubmitScoreRequest) -> SubmitScoreResponse:
        """점수 제출 실행.

        Raises:
            PredictionServiceError: 예측 실패 (location=callAutoML)
            StoreConnectionError: 저장소 연결 실패 (location=getMongoDB)
            SubmissionPersistError: 저장 실패 (location=insertOne)
        """
        # 1. Predict
        results = await self._gateway.predict(request.image)

        # 2. Score
        score = extract_score(results)

        # 3. Persist
        submission = Submission(address=request.address, score=score, result=results)
        await self._writer.insert(submission)

        logger.info(
            "score_submitted",
            extra={
                "address": request.address,
                "score": score,
                "timestamp": submission.timestamp,
                "result_count": len(results),
            },
        )

        return SubmitScoreResponse(score=score, result=results)
