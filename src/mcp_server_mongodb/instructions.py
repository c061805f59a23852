"""
Server instructions for the MongoDB MCP Server.

These instructions are sent to the client during initialization
to provide context about how to use the server's capabilities.
"""

INSTRUCTIONS = """Run MongoDB database commands against a single configured database.

## Available Tools

- `execute_mongo_command`: Run any database command given as a JSON document and get the reply as JSON

## Writing Commands

The command is a JSON object whose FIRST key is the command name. Key order matters.

**Health check**
- `{"ping": 1}`

**Exploration**
- List collections: `{"listCollections": 1, "nameOnly": true}`
- Collection stats: `{"collStats": "users"}`
- Indexes: `{"listIndexes": "users"}`

**Reading data**
- Find: `{"find": "users", "filter": {"age": {"$gte": 30}}, "limit": 10}`
- Count: `{"count": "users", "query": {"active": true}}`
- Aggregate: `{"aggregate": "orders", "pipeline": [{"$group": {"_id": "$status", "n": {"$sum": 1}}}], "cursor": {}}`

Query results are returned in `cursor.firstBatch`. Use `{"getMore": <cursor id>, "collection": "users"}` to fetch more.

**Writing data**
- Insert: `{"insert": "users", "documents": [{"name": "Alice", "age": 30}]}`
- Update: `{"update": "users", "updates": [{"q": {"name": "Alice"}, "u": {"$set": {"age": 31}}}]}`
- Delete: `{"delete": "users", "deletes": [{"q": {"name": "Alice"}, "limit": 1}]}`

## Extended JSON

Use type wrappers for values plain JSON cannot express:
- Dates: `{"$date": "2024-01-31T12:00:00Z"}`
- ObjectIds: `{"$oid": "65b9f0c2a1b2c3d4e5f60718"}`
- 64-bit integers and decimals: `{"$numberLong": "9007199254740993"}`, `{"$numberDecimal": "19.99"}`

Replies use the same encoding, so values can be copied into follow-up commands.
"""


def get_instructions(database_name: str) -> str:
    """Get server instructions naming the configured database."""
    return f"Connected database: `{database_name}`\n\n{INSTRUCTIONS}"
