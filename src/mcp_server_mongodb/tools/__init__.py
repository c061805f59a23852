"""
MCP Tools for the MongoDB server.

Each tool is defined in its own module and exported here.
"""

from .execute_mongo_command import execute_mongo_command

__all__ = [
    "execute_mongo_command",
]
