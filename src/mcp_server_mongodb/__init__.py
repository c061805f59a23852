"""
MongoDB MCP Server - A FastMCP server that runs MongoDB database commands.

This module provides the CLI entry point for the MCP server.
"""

import logging

import click

from .configs import (
    DEFAULT_PORT,
    ENV_DATABASE_NAME,
    ENV_MONGO_URI,
    ENV_SERVER_PORT,
    SERVER_LOCALHOST,
    SERVER_VERSION,
    ServerConfig,
)
from .errors import ConfigurationError
from .server import create_mcp_server

__version__ = SERVER_VERSION

logger = logging.getLogger("mcp_server_mongodb")
logging.basicConfig(level=logging.INFO, format="[mongodb] %(levelname)s - %(message)s")


@click.command()
@click.option(
    "--mongo-uri",
    default=None,
    envvar=ENV_MONGO_URI,
    help=f"(Required, env var `{ENV_MONGO_URI}`) MongoDB connection string",
)
@click.option(
    "--database-name",
    default=None,
    envvar=ENV_DATABASE_NAME,
    help=f"(Required, env var `{ENV_DATABASE_NAME}`) Database to run commands against",
)
@click.option(
    "--port",
    type=int,
    default=None,
    envvar=ENV_SERVER_PORT,
    help=f"(Default: `{DEFAULT_PORT}`) Port to listen on for HTTP transport",
)
@click.option(
    "--host",
    default=SERVER_LOCALHOST,
    envvar="MCPMONGO_SERVER_HOST",
    help="Host to bind the MCP server for HTTP transport",
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "http"]),
    default="stdio",
    envvar="MCPMONGO_TRANSPORT",
    help="(Default: `stdio`) Transport type. Use `http` for HTTP Streamable transport.",
)
@click.option(
    "--command-timeout",
    type=float,
    default=-1,
    envvar="MCPMONGO_COMMAND_TIMEOUT",
    help="(Default: `-1`) Command execution timeout in seconds. Set to -1 to disable timeout.",
)
@click.option(
    "--json-mode",
    type=click.Choice(["relaxed", "canonical"]),
    default="relaxed",
    envvar="MCPMONGO_JSON_MODE",
    help="(Default: `relaxed`) Extended JSON mode used to encode command results.",
)
def main(
    mongo_uri: str | None,
    database_name: str | None,
    port: int | None,
    host: str,
    transport: str,
    command_timeout: float,
    json_mode: str,
) -> None:
    """MongoDB MCP Server - Execute MongoDB commands via MCP."""
    logger.info("🍃 MongoDB MCP Server v" + SERVER_VERSION)

    if port is None:
        port = DEFAULT_PORT
        logger.info(f"{ENV_SERVER_PORT} is not set. Using default port: {port}")

    try:
        config = ServerConfig(
            mongo_uri=mongo_uri,
            database_name=database_name,
            port=port,
            host=host,
            transport=transport,
            command_timeout=command_timeout,
            json_mode=json_mode,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e))

    logger.info(f"MongoDB URI: {config.redacted_uri}")
    logger.info(f"Database: {config.database_name}")
    if config.command_timeout > 0:
        logger.info(f"Command timeout: {config.command_timeout}s")
    else:
        logger.info("Command timeout: disabled")
    logger.info(f"Result JSON mode: {config.json_mode}")

    mcp = create_mcp_server(config)

    if config.transport == "http":
        logger.info("MCP server initialized in \033[32mhttp\033[0m mode")
        logger.info(
            f"🍃 Connect to MongoDB MCP Server at \033[1m\033[36mhttp://{config.host}:{config.port}/mcp\033[0m"
        )
        mcp.run(transport="http", host=config.host, port=config.port)
    else:
        logger.info("MCP server initialized in \033[32mstdio\033[0m mode")
        logger.info("Waiting for client connection")
        mcp.run(transport="stdio")


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
