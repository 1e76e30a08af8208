"""Submission Writer Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recycle_score.domain.entities import Submission


class SubmissionWriter(ABC):
    """제출 기록 저장 Port."""

    @abstractmethod
    async def insert(self, submission: Submission) -> None:
        """제출 기록을 저장합니다.

        Raises:
            StoreConnectionError: 저장소 연결 실패
            SubmissionPersistError: 저장 실패
        """
        ...
