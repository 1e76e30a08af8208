"""MongoDB Address Aggregate Reader Implementation."""

from __future__ import annotations

from typing import Any, Sequence

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from recycle_score.application.common.exceptions import AddressHistoryError
from recycle_score.application.history.ports import AddressAggregateReader
from recycle_score.domain.constants import SUBMISSIONS_COLLECTION
from recycle_score.domain.value_objects import AddressAggregate
from recycle_score.infrastructure.persistence_mongo.connection import MongoConnectionProvider


def build_address_pipeline(skip: int | float, limit: int | float) -> list[dict[str, Any]]:
    """주소별 그룹 집계 파이프라인."""
    return [
        {
            "$group": {
                "_id": "$address",
                "totalScore": {"$sum": "$score"},
                "count": {"$sum": 1},
            }
        },
        {
            "$project": {
                "_id": 0,
                "address": "$_id",
                "totalScore": 1,
                "count": 1,
            }
        },
        {"$skip": skip},
        {"$limit": limit},
    ]


class MongoAddressAggregateReader(AddressAggregateReader):
    """MongoDB aggregate 기반 주소 집계 Reader.

    정렬 단계가 없으므로 결과 순서는 $group 출력 순서를 따릅니다.
    """

    def __init__(
        self,
        provider: MongoConnectionProvider,
        collection_name: str = SUBMISSIONS_COLLECTION,
    ) -> None:
        self._provider = provider
        self._collection_name = collection_name

    async def aggregate_by_address(
        self,
        skip: int | float,
        limit: int | float,
    ) -> Sequence[AddressAggregate]:
        """주소별 점수 합계/제출 수를 조회합니다."""
        pipeline = build_address_pipeline(skip, limit)
        async with self._provider.connect() as db:
            try:
                cursor = await db[self._collection_name].aggregate(pipeline)
                documents = await cursor.to_list()
            except (PyMongoError, BSONError, OverflowError) as exc:
                raise AddressHistoryError(exc) from exc
        return [AddressAggregate.from_document(doc) for doc in documents]
