"""검증 관련 애플리케이션 예외 (400)."""

from recycle_score.application.common.exceptions.base import ApplicationError


class BodyMissingError(ApplicationError):
    """요청 본문 없음."""

    def __init__(self) -> None:
        super().__init__("Body is undefined")


class SubmissionFormatError(ApplicationError):
    """address / image 필드 누락."""

    def __init__(self) -> None:
        super().__init__("Format: { address: string, image: string }")
