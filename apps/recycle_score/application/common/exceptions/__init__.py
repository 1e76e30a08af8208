"""Recycle Score 애플리케이션 예외."""

from recycle_score.application.common.exceptions.base import ApplicationError
from recycle_score.application.common.exceptions.upstream import (
    AddressHistoryError,
    PredictionServiceError,
    StoreConnectionError,
    SubmissionPersistError,
    UpstreamError,
)
from recycle_score.application.common.exceptions.validation import (
    BodyMissingError,
    SubmissionFormatError,
)

__all__ = [
    "AddressHistoryError",
    "ApplicationError",
    "BodyMissingError",
    "PredictionServiceError",
    "StoreConnectionError",
    "SubmissionFormatError",
    "SubmissionPersistError",
    "UpstreamError",
]
