"""
Error types raised by the MongoDB MCP server.

Configuration and connectivity errors are fatal at startup. The others are
raised per tool call and reported back to the client as tool errors.
"""


class MongoMCPError(Exception):
    """Base class for all server errors."""


class ConfigurationError(MongoMCPError):
    """A required setting is missing or invalid."""


class ConnectivityError(MongoMCPError):
    """The database could not be reached at startup."""


class CommandError(MongoMCPError):
    """Base class for errors scoped to a single tool call."""


class InputError(CommandError):
    """The `command` parameter is missing or not a string."""


class ParseError(CommandError):
    """The command text is not a valid Extended JSON document."""


class ExecutionError(CommandError):
    """The database rejected or failed to run the command."""


class SerializationError(CommandError):
    """The command reply could not be encoded as Extended JSON."""
