"""MongoDB Connection Provider.

요청 단위 일회성 연결:
- 연결 생성 → ping 확인 → database 핸들 전달 → 작업 완료 후 close
- close는 소비 작업이 끝난 뒤(성공/예외 모두) 정확히 한 번 수행
- 연결 실패는 StoreConnectionError로 전파 (재연결 없음)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, TypeVar

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from recycle_score.application.common.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ClientFactory = Callable[[str], AsyncMongoClient]


class MongoConnectionProvider:
    """설정된 MongoDB URL/DB에 대한 요청 단위 연결 제공자."""

    def __init__(
        self,
        url: str,
        database_name: str,
        client_factory: ClientFactory = AsyncMongoClient,
    ) -> None:
        """초기화.

        Args:
            url: MongoDB 연결 URL
            database_name: 사용할 데이터베이스 이름
            client_factory: 클라이언트 생성 함수 (테스트 주입용)
        """
        self._url = url
        self._database_name = database_name
        self._client_factory = client_factory

    async def _open(self) -> AsyncMongoClient:
        """클라이언트 생성 및 연결 확인."""
        client: AsyncMongoClient | None = None
        try:
            client = self._client_factory(self._url)
            await client.admin.command("ping")
        except (PyMongoError, ValueError, TypeError) as exc:
            logger.error(
                "mongodb_connect_failed",
                extra={"database": self._database_name, "error": str(exc)},
            )
            if client is not None:
                await client.close()
            raise StoreConnectionError(exc) from exc
        return client

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncDatabase[dict[str, Any]]]:
        """database 핸들을 제공하고 블록 종료 후 연결을 닫는다.

        Raises:
            StoreConnectionError: 연결 실패
        """
        client = await self._open()
        try:
            yield client[self._database_name]
        finally:
            await client.close()
            logger.debug("mongodb_connection_closed", extra={"database": self._database_name})

    async def run(self, work: Callable[[AsyncDatabase[dict[str, Any]]], Awaitable[T]]) -> T:
        """연결 범위 안에서 work를 끝까지 await 한 뒤 결과를 반환."""
        async with self.connect() as db:
            return await work(db)

    async def ping(self) -> None:
        """연결 가능 여부 확인 (readiness)."""
        async with self.connect():
            pass
