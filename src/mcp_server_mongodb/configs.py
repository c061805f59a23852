from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlsplit, urlunsplit

from .errors import ConfigurationError

SERVER_NAME = "MongoDB MCP Server"
SERVER_VERSION = "0.1.0"
SERVER_LOCALHOST = "127.0.0.1"

ENV_MONGO_URI = "MCPMONGO_MONGO_URI"
ENV_DATABASE_NAME = "MCPMONGO_DATABASE_NAME"
ENV_SERVER_PORT = "MCPMONGO_SERVER_PORT"

DEFAULT_PORT = 26275
# Startup connectivity check budget in seconds
PING_TIMEOUT = 2.0

JsonMode = Literal["relaxed", "canonical"]
Transport = Literal["stdio", "http"]


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for the MCP server, built once at startup."""

    mongo_uri: str | None
    database_name: str | None
    port: int = DEFAULT_PORT
    host: str = SERVER_LOCALHOST
    transport: Transport = "stdio"
    command_timeout: float = -1
    json_mode: JsonMode = "relaxed"

    def __post_init__(self):
        if not self.mongo_uri:
            raise ConfigurationError(f"Environment variable {ENV_MONGO_URI} is not set.")
        if not self.database_name:
            raise ConfigurationError(f"Environment variable {ENV_DATABASE_NAME} is not set.")
        if self.json_mode not in ("relaxed", "canonical"):
            raise ConfigurationError(f"Unsupported JSON mode: {self.json_mode}")

    @property
    def redacted_uri(self) -> str:
        return redact_uri(self.mongo_uri)


def redact_uri(uri: str) -> str:
    """Mask the password of a connection string so it can be logged."""
    parts = urlsplit(uri)
    if parts.password is None:
        return uri
    netloc = parts.netloc.replace(f":{parts.password}@", ":****@", 1)
    return urlunsplit(parts._replace(netloc=netloc))
