"""Recycle Score Dependencies - FastAPI Dependency Injection."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from recycle_score.application.history.ports import AddressAggregateReader
from recycle_score.application.history.queries import ListAddressesQuery
from recycle_score.application.submission.commands import SubmitScoreCommand
from recycle_score.application.submission.ports import PredictionGateway, SubmissionWriter
from recycle_score.infrastructure.integrations.automl import AutoMLPredictionGateway
from recycle_score.infrastructure.persistence_mongo import (
    MongoAddressAggregateReader,
    MongoConnectionProvider,
    MongoSubmissionWriter,
)
from recycle_score.setup.config import Settings, get_settings

# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_connection_provider() -> MongoConnectionProvider:
    """MongoDB Connection Provider 인스턴스 반환."""
    settings = get_settings()
    return MongoConnectionProvider(
        url=settings.mongodb_url,
        database_name=settings.mongodb_name,
    )


@lru_cache
def get_prediction_gateway() -> PredictionGateway:
    """AutoML Prediction Gateway 인스턴스 반환 (프로세스 단위 공유)."""
    settings = get_settings()
    return AutoMLPredictionGateway(
        project=settings.gcp_project_name,
        region=settings.gcp_region,
        model_id=settings.auto_ml_model,
    )


async def close_prediction_gateway() -> None:
    """애플리케이션 종료 시 Prediction Gateway 정리."""
    await get_prediction_gateway().close()
    get_prediction_gateway.cache_clear()


def get_submission_writer(
    provider: Annotated[MongoConnectionProvider, Depends(get_connection_provider)],
) -> SubmissionWriter:
    """Submission Writer 인스턴스 반환."""
    return MongoSubmissionWriter(provider)


def get_address_reader(
    provider: Annotated[MongoConnectionProvider, Depends(get_connection_provider)],
) -> AddressAggregateReader:
    """Address Aggregate Reader 인스턴스 반환."""
    return MongoAddressAggregateReader(provider)


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands / Queries)
# ─────────────────────────────────────────────────────────────────────────────


def get_submit_score_command(
    gateway: Annotated[PredictionGateway, Depends(get_prediction_gateway)],
    writer: Annotated[SubmissionWriter, Depends(get_submission_writer)],
) -> SubmitScoreCommand:
    """Submit Score Command 인스턴스 반환."""
    return SubmitScoreCommand(prediction_gateway=gateway, submission_writer=writer)


def get_list_addresses_query(
    reader: Annotated[AddressAggregateReader, Depends(get_address_reader)],
) -> ListAddressesQuery:
    """List Addresses Query 인스턴스 반환."""
    return ListAddressesQuery(reader)


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
ConnectionProviderDep = Annotated[MongoConnectionProvider, Depends(get_connection_provider)]
SubmitScoreCommandDep = Annotated[SubmitScoreCommand, Depends(get_submit_score_command)]
ListAddressesQueryDep = Annotated[ListAddressesQuery, Depends(get_list_addresses_query)]
