"""MongoDB Submission Writer Implementation."""

from __future__ import annotations

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from recycle_score.application.common.exceptions import SubmissionPersistError
from recycle_score.application.submission.ports import SubmissionWriter
from recycle_score.domain.constants import SUBMISSIONS_COLLECTION
from recycle_score.domain.entities import Submission
from recycle_score.infrastructure.persistence_mongo.connection import MongoConnectionProvider


class MongoSubmissionWriter(SubmissionWriter):
    """MongoDB 기반 제출 기록 Writer.

    SubmissionWriter Port를 구현합니다.
    """

    def __init__(
        self,
        provider: MongoConnectionProvider,
        collection_name: str = SUBMISSIONS_COLLECTION,
    ) -> None:
        self._provider = provider
        self._collection_name = collection_name

    async def insert(self, submission: Submission) -> None:
        """insert_one으로 제출 기록을 저장합니다."""
        async with self._provider.connect() as db:
            try:
                await db[self._collection_name].insert_one(submission.to_document())
            except (PyMongoError, BSONError, OverflowError) as exc:
                raise SubmissionPersistError(exc) from exc
