"""외부 서비스(AutoML, MongoDB) 실패 예외 (500).

location은 실패 단계를 응답에 노출할 때만 설정합니다.
"""

from __future__ import annotations


class UpstreamError(Exception):
    """외부 의존성 호출 실패.

    Attributes:
        cause: 원본 예외
        location: 응답에 포함할 실패 단계 (None이면 생략)
    """

    location: str | None = None

    def __init__(self, cause: BaseException, location: str | None = None) -> None:
        self.cause = cause
        if location is not None:
            self.location = location
        self.message = str(cause) or type(cause).__name__
        super().__init__(self.message)


class PredictionServiceError(UpstreamError):
    """AutoML predict 실패."""

    location = "callAutoML"


class StoreConnectionError(UpstreamError):
    """MongoDB 연결 실패."""

    location = "getMongoDB"


class SubmissionPersistError(UpstreamError):
    """제출 기록 insertOne 실패."""

    location = "insertOne"


class AddressHistoryError(UpstreamError):
    """주소 집계 조회 실패 (연결/aggregate 구분 없이 location 생략)."""

    location = None
