import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from .configs import PING_TIMEOUT, SERVER_NAME, SERVER_VERSION, ServerConfig
from .database import MongoDatabaseClient
from .errors import CommandError
from .instructions import get_instructions
from .tools import execute_mongo_command
from .tools.execute_mongo_command import COMMAND_DESCRIPTION, DESCRIPTION, NAME

logger = logging.getLogger("mcp_server_mongodb")


def create_mcp_server(
    config: ServerConfig,
    db_client: MongoDatabaseClient | None = None,
) -> FastMCP:
    """
    Build the FastMCP server for the given configuration.

    The database client is connected when the server starts and closed
    when it stops. A client can be passed in to share or fake the connection.
    """
    if db_client is None:
        db_client = MongoDatabaseClient(
            uri=config.mongo_uri,
            database_name=config.database_name,
            ping_timeout=PING_TIMEOUT,
        )

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        async with db_client:
            yield

    mcp = FastMCP(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        instructions=get_instructions(config.database_name),
        lifespan=lifespan,
    )

    @mcp.tool(name=NAME, description=DESCRIPTION)
    async def execute_mongo_command_tool(
        command: Annotated[str, Field(description=COMMAND_DESCRIPTION)],
    ) -> str:
        try:
            return await execute_mongo_command(
                command,
                db_client=db_client,
                json_mode=config.json_mode,
                command_timeout=config.command_timeout,
            )
        except CommandError as e:
            logger.error(f"Error executing tool {NAME}: {e}")
            raise ToolError(f"{type(e).__name__}: {e}") from e

    logger.info(f"Tool '{NAME}' registered")
    return mcp
