import logging
from collections.abc import Mapping
from typing import Any

import pymongo
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from .configs import PING_TIMEOUT, SERVER_VERSION, redact_uri
from .errors import ConnectivityError

logger = logging.getLogger("mcp_server_mongodb")


class MongoDatabaseClient:
    """
    Owns the MongoDB client for the lifetime of the server.

    The underlying AsyncMongoClient is pooled and safe to share between
    concurrent tool calls. Use it as an async context manager so the client
    is connected before serving and closed on shutdown.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        ping_timeout: float = PING_TIMEOUT,
        client: AsyncMongoClient | None = None,
    ):
        self._uri = uri
        self.database_name = database_name
        self._ping_timeout = ping_timeout
        self._client = client
        self._database: AsyncDatabase | None = None
        self._closed = False

    @property
    def database(self) -> AsyncDatabase:
        if self._database is None:
            raise ConnectivityError("Database client is not connected")
        return self._database

    async def connect(self) -> None:
        """Create the client and verify the server is reachable."""
        logger.info(f"🔌 Connecting to MongoDB at {redact_uri(self._uri)}")

        try:
            if self._client is None:
                self._client = AsyncMongoClient(
                    self._uri, appname=f"mcp-server-mongodb/{SERVER_VERSION}"
                )
            with pymongo.timeout(self._ping_timeout):
                await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"❌ Failed to connect to MongoDB: {e}")
            await self.close()
            raise ConnectivityError(f"Failed to connect to MongoDB: {e}") from e

        self._database = self._client[self.database_name]
        self._closed = False
        logger.info(f"✅ Successfully connected to MongoDB database `{self.database_name}`")

    async def run_command(
        self, command: Mapping[str, Any], timeout: float | None = None
    ) -> dict[str, Any]:
        """
        Run a database command and return the raw reply document.

        A positive `timeout` bounds the whole operation; on expiry the
        driver aborts the call and raises a timeout error.
        """
        if timeout is not None and timeout > 0:
            with pymongo.timeout(timeout):
                return await self.database.command(command)
        return await self.database.command(command)

    async def close(self) -> None:
        if self._closed or self._client is None:
            return
        self._closed = True
        self._database = None
        await self._client.close()
        logger.info("MongoDB connection closed")

    async def __aenter__(self) -> "MongoDatabaseClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
