"""Pytest configuration for recycle_score tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for anyio."""
    return "asyncio"


@pytest.fixture
def plastic_result() -> list[dict[str, Any]]:
    """plastic 1건 (0.9) 검출 응답."""
    return [
        {
            "payload": [
                {
                    "displayName": "plastic",
                    "imageObjectDetection": {"score": 0.9},
                }
            ]
        }
    ]


@pytest.fixture
def mixed_result() -> list[dict[str, Any]]:
    """허용/비허용 라벨과 임계값 경계가 섞인 응답."""
    return [
        {
            "payload": [
                {"displayName": "glass", "imageObjectDetection": {"score": 0.75}},
                {"displayName": "metal", "imageObjectDetection": {"score": 0.5}},
                {"displayName": "paper", "imageObjectDetection": {"score": 0.99}},
                {"displayName": "plastic", "imageObjectDetection": {"score": 0.51}},
            ]
        },
        {
            "payload": [
                {"displayName": "metal", "imageObjectDetection": {"score": 0.8}},
            ]
        },
    ]


@pytest.fixture
def mock_prediction_gateway(plastic_result) -> AsyncMock:
    """PredictionGateway mock."""
    gateway = AsyncMock()
    gateway.predict = AsyncMock(return_value=plastic_result)
    return gateway


@pytest.fixture
def mock_submission_writer() -> AsyncMock:
    """SubmissionWriter mock."""
    writer = AsyncMock()
    writer.insert = AsyncMock(return_value=None)
    return writer


@pytest.fixture
def mock_address_reader() -> AsyncMock:
    """AddressAggregateReader mock."""
    reader = AsyncMock()
    reader.aggregate_by_address = AsyncMock(return_value=[])
    return reader


@pytest.fixture
def mongo_collection() -> MagicMock:
    """AsyncCollection mock."""
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.aggregate = AsyncMock(return_value=cursor)
    return collection


@pytest.fixture
def mongo_client(mongo_collection) -> MagicMock:
    """AsyncMongoClient mock (db[collection] → mongo_collection)."""
    database = MagicMock()
    database.__getitem__.return_value = mongo_collection

    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    client.close = AsyncMock()
    client.__getitem__.return_value = database
    return client
