"""
Shared fixtures for unit tests.

The MongoDB driver is replaced by mocks so these tests run without a server.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from mcp_server_mongodb.configs import ServerConfig
from mcp_server_mongodb.database import MongoDatabaseClient


@pytest.fixture
def mock_database() -> MagicMock:
    """Mock AsyncDatabase whose `command` replies ok."""
    database = MagicMock()
    database.command = AsyncMock(return_value={"ok": 1.0})
    return database


@pytest.fixture
def mock_mongo_client(mock_database) -> MagicMock:
    """Mock AsyncMongoClient that answers ping and hands out `mock_database`."""
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1.0})
    client.__getitem__.return_value = mock_database
    client.close = AsyncMock()
    return client


@pytest.fixture
def db_client(mock_mongo_client) -> MongoDatabaseClient:
    """Database client wired to the mock driver, not yet connected."""
    return MongoDatabaseClient(
        uri="mongodb://localhost:27017",
        database_name="testdb",
        client=mock_mongo_client,
    )


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(mongo_uri="mongodb://localhost:27017", database_name="testdb")
