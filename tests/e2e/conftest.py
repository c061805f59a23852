"""
Fixtures for E2E testing of the MCP server against a real MongoDB.

These tests are skipped unless MCPMONGO_TEST_URI points at a reachable server.
Each test run uses its own throwaway database which is dropped afterwards.
"""

import os
import uuid
from typing import AsyncGenerator

import pytest

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastmcp import Client

from mcp_server_mongodb.configs import ServerConfig
from mcp_server_mongodb.server import create_mcp_server


def get_result_text(result) -> str:
    """Extract text from a tool call result (CallToolResult)."""
    if hasattr(result, 'content') and result.content:
        return result.content[0].text
    return str(result)


@pytest.fixture
def mongo_uri() -> str:
    """Get the MongoDB connection string from environment."""
    uri = os.environ.get("MCPMONGO_TEST_URI")
    if not uri:
        pytest.skip("MCPMONGO_TEST_URI not set")
    return uri


@pytest.fixture
def database_name() -> str:
    return f"mcp_e2e_{uuid.uuid4().hex[:8]}"


def create_client(mongo_uri: str, database_name: str, **options) -> Client:
    """Create an in-process client for a server with the given options."""
    config = ServerConfig(mongo_uri=mongo_uri, database_name=database_name, **options)
    return Client(create_mcp_server(config))


@pytest.fixture
async def mongo_client(mongo_uri: str, database_name: str) -> AsyncGenerator[Client, None]:
    """Client connected to a fresh database, dropped on teardown."""
    client = create_client(mongo_uri, database_name)
    async with client:
        yield client
        await client.call_tool_mcp("execute_mongo_command", {"command": '{"dropDatabase": 1}'})
