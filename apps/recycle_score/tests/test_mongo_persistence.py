"""MongoDB Connection Provider / Adapter 테스트."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson.errors import InvalidDocument
from pymongo.errors import ConfigurationError, OperationFailure, ServerSelectionTimeoutError

from recycle_score.application.common.exceptions import (
    AddressHistoryError,
    StoreConnectionError,
    SubmissionPersistError,
)
from recycle_score.domain.entities import Submission
from recycle_score.domain.value_objects import AddressAggregate
from recycle_score.infrastructure.persistence_mongo import (
    MongoAddressAggregateReader,
    MongoConnectionProvider,
    MongoSubmissionWriter,
)
from recycle_score.infrastructure.persistence_mongo.address_reader_mongo import (
    build_address_pipeline,
)


def _provider(client: MagicMock) -> MongoConnectionProvider:
    return MongoConnectionProvider(
        url="mongodb://localhost:27017",
        database_name="recycle",
        client_factory=lambda url: client,
    )


class TestMongoConnectionProvider:
    """요청 단위 연결 수명 테스트."""

    @pytest.mark.anyio
    async def test_run_closes_after_work_completes(self, mongo_client):
        """work가 끝난 뒤에만 close."""
        provider = _provider(mongo_client)
        observed = {}

        async def work(db):
            observed["closed_during_work"] = mongo_client.close.await_count
            return "done"

        result = await provider.run(work)

        assert result == "done"
        assert observed["closed_during_work"] == 0
        mongo_client.close.assert_awaited_once()
        mongo_client.__getitem__.assert_called_once_with("recycle")

    @pytest.mark.anyio
    async def test_close_once_when_work_raises(self, mongo_client):
        provider = _provider(mongo_client)

        async def work(db):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await provider.run(work)

        mongo_client.close.assert_awaited_once()

    @pytest.mark.anyio
    async def test_ping_failure_raises_connection_error(self, mongo_client):
        """연결 실패는 무시되지 않고 StoreConnectionError로 전파."""
        mongo_client.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no servers")
        )
        provider = _provider(mongo_client)
        work = AsyncMock()

        with pytest.raises(StoreConnectionError) as exc_info:
            await provider.run(work)

        assert exc_info.value.location == "getMongoDB"
        work.assert_not_awaited()
        mongo_client.close.assert_awaited_once()

    @pytest.mark.anyio
    async def test_invalid_url_raises_connection_error(self):
        def factory(url):
            raise ConfigurationError("empty host")

        provider = MongoConnectionProvider(url="", database_name="", client_factory=factory)

        with pytest.raises(StoreConnectionError):
            await provider.ping()


class TestMongoSubmissionWriter:
    """MongoSubmissionWriter 테스트."""

    @pytest.mark.anyio
    async def test_insert_document(self, mongo_client, mongo_collection, plastic_result):
        writer = MongoSubmissionWriter(_provider(mongo_client))
        submission = Submission(
            address="1 Main St", score=1, result=plastic_result, timestamp=1700000000000
        )

        await writer.insert(submission)

        mongo_collection.insert_one.assert_awaited_once_with(
            {
                "address": "1 Main St",
                "timestamp": 1700000000000,
                "score": 1,
                "result": plastic_result,
            }
        )
        mongo_client.close.assert_awaited_once()

    @pytest.mark.anyio
    async def test_insert_failure(self, mongo_client, mongo_collection, plastic_result):
        mongo_collection.insert_one = AsyncMock(side_effect=OperationFailure("not authorized"))
        writer = MongoSubmissionWriter(_provider(mongo_client))

        with pytest.raises(SubmissionPersistError) as exc_info:
            await writer.insert(Submission(address="1 Main St", score=1, result=plastic_result))

        assert exc_info.value.location == "insertOne"
        mongo_client.close.assert_awaited_once()


    @pytest.mark.anyio
    async def test_unencodable_document(self, mongo_client, mongo_collection, plastic_result):
        """BSON 인코딩 실패도 insertOne 실패로 보고."""
        mongo_collection.insert_one = AsyncMock(
            side_effect=OverflowError("MongoDB can only handle up to 8-byte ints")
        )
        writer = MongoSubmissionWriter(_provider(mongo_client))

        with pytest.raises(SubmissionPersistError) as exc_info:
            await writer.insert(Submission(address=10**20, score=1, result=plastic_result))

        assert exc_info.value.location == "insertOne"
        assert isinstance(exc_info.value.cause, OverflowError)
        mongo_client.close.assert_awaited_once()


class TestMongoAddressAggregateReader:
    """MongoAddressAggregateReader 테스트."""

    def test_pipeline_shape(self):
        assert build_address_pipeline(0, 10) == [
            {
                "$group": {
                    "_id": "$address",
                    "totalScore": {"$sum": "$score"},
                    "count": {"$sum": 1},
                }
            },
            {"$project": {"_id": 0, "address": "$_id", "totalScore": 1, "count": 1}},
            {"$skip": 0},
            {"$limit": 10},
        ]

    @pytest.mark.anyio
    async def test_aggregate_maps_documents(self, mongo_client, mongo_collection):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(
            return_value=[
                {"address": "1 Main St", "totalScore": 4, "count": 3},
                {"address": "2 Oak Ave", "totalScore": 0, "count": 1},
            ]
        )
        mongo_collection.aggregate = AsyncMock(return_value=cursor)
        reader = MongoAddressAggregateReader(_provider(mongo_client))

        result = await reader.aggregate_by_address(skip=5, limit=2)

        assert result == [
            AddressAggregate(address="1 Main St", total_score=4, count=3),
            AddressAggregate(address="2 Oak Ave", total_score=0, count=1),
        ]
        mongo_collection.aggregate.assert_awaited_once_with(build_address_pipeline(5, 2))
        mongo_client.close.assert_awaited_once()

    @pytest.mark.anyio
    async def test_aggregate_failure(self, mongo_client, mongo_collection):
        mongo_collection.aggregate = AsyncMock(side_effect=OperationFailure("bad $skip"))
        reader = MongoAddressAggregateReader(_provider(mongo_client))

        with pytest.raises(AddressHistoryError) as exc_info:
            await reader.aggregate_by_address(skip=-1, limit=10)

        assert exc_info.value.location is None

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "error",
        [
            OverflowError("MongoDB can only handle up to 8-byte ints"),
            InvalidDocument("cannot encode object"),
        ],
    )
    async def test_unencodable_pipeline(self, mongo_client, mongo_collection, error):
        mongo_collection.aggregate = AsyncMock(side_effect=error)
        reader = MongoAddressAggregateReader(_provider(mongo_client))

        with pytest.raises(AddressHistoryError) as exc_info:
            await reader.aggregate_by_address(skip=10**20, limit=10)

        assert exc_info.value.cause is error
        mongo_client.close.assert_awaited_once()
