"""
Execute MongoDB command tool - Run a database command given as Extended JSON.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from pymongo.errors import ExecutionTimeout, OperationFailure, PyMongoError

from ..ejson import parse_command, serialize_document
from ..errors import ExecutionError, InputError

logger = logging.getLogger("mcp_server_mongodb")

NAME = "execute_mongo_command"

DESCRIPTION = (
    "Execute a MongoDB command (as JSON) in the configured database. "
    "Returns the command reply as JSON."
)

COMMAND_DESCRIPTION = (
    'MongoDB command as JSON, e.g. {"ping": 1} or '
    '{"find": "collection_name", "filter": {"field": "value"}}. '
    "Extended JSON type wrappers such as $date, $oid and $numberLong are supported."
)


SECRET_FIELDS = frozenset({"pwd", "password"})


def redact_secrets(value: Any) -> Any:
    """Copy of a command with credential fields masked, for logging."""
    if isinstance(value, Mapping):
        return {
            key: "****" if key in SECRET_FIELDS else redact_secrets(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_secrets(item) for item in value]
    return value


def _describe_failure(e: PyMongoError, timeout: float) -> str:
    # Driver timeouts without a per-call deadline are plain failures
    if timeout > 0 and (e.timeout or isinstance(e, ExecutionTimeout)):
        return f"Command cancelled: deadline of {timeout}s exceeded ({e})"
    if isinstance(e, OperationFailure):
        return f"Command failed (code {e.code}): {e}"
    return f"Command failed: {e}"


async def execute_mongo_command(
    command: Any,
    db_client: Any,
    json_mode: str = "relaxed",
    command_timeout: float = -1,
) -> str:
    """
    Run a MongoDB command against the configured database.

    Args:
        command: JSON text of the command document
        db_client: MongoDatabaseClient instance (injected by server)
        json_mode: Extended JSON mode for the reply, `relaxed` or `canonical`
        command_timeout: Deadline in seconds, -1 to disable

    Returns:
        The command reply encoded as Extended JSON

    Raises:
        InputError, ParseError, ExecutionError or SerializationError
    """
    logger.info(f"Received {NAME} request")

    if command is None:
        raise InputError("Parameter 'command' is required.")
    if not isinstance(command, str):
        raise InputError("Parameter 'command' must be a string.")

    document = parse_command(command)
    logger.info(
        f"Running MongoDB command {redact_secrets(document)} "
        f"in database '{db_client.database_name}'"
    )

    try:
        result = await db_client.run_command(document, timeout=command_timeout)
    except PyMongoError as e:
        logger.error(f"MongoDB command failed: {e}")
        raise ExecutionError(_describe_failure(e, command_timeout)) from e
    except asyncio.CancelledError:
        logger.warning(f"{NAME} cancelled by caller")
        raise
    logger.info("MongoDB command succeeded")

    response_text = serialize_document(result, mode=json_mode)
    logger.info(f"Command result: {response_text}")
    return response_text
