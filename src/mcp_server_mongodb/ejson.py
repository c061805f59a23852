"""
Extended JSON helpers for command documents and command replies.
"""

from collections.abc import Mapping
from typing import Any

from bson import SON
from bson.errors import BSONError
from bson.json_util import CANONICAL_JSON_OPTIONS, RELAXED_JSON_OPTIONS, JSONOptions, dumps, loads

from .errors import ParseError, SerializationError

_BASE_OPTIONS = {
    "relaxed": RELAXED_JSON_OPTIONS,
    "canonical": CANONICAL_JSON_OPTIONS,
}


def json_options_for(mode: str = "relaxed") -> JSONOptions:
    """Return JSON options for `mode` that decode documents into ordered SON."""
    try:
        options = _BASE_OPTIONS[mode]
    except KeyError:
        raise ValueError(f"Unsupported JSON mode: {mode}") from None
    return options.with_options(document_class=SON)


def parse_command(text: str, mode: str = "relaxed") -> SON:
    """
    Parse Extended JSON text into an ordered command document.

    Key order is kept as written since the first key names the command.
    Type wrappers such as `$date`, `$numberLong` or `$binary` are decoded
    into their BSON types.
    """
    try:
        document = loads(text, json_options=json_options_for(mode))
    except (ValueError, TypeError, BSONError) as e:
        raise ParseError(f"Invalid command JSON: {e}") from e

    if not isinstance(document, Mapping):
        raise ParseError(
            f"Command must be a JSON object, got {type(document).__name__}"
        )
    return document


def serialize_document(document: Mapping[str, Any], mode: str = "relaxed") -> str:
    """Encode a reply document as Extended JSON text."""
    try:
        return dumps(document, json_options=json_options_for(mode))
    except (ValueError, TypeError, BSONError) as e:
        raise SerializationError(f"Failed to encode command result: {e}") from e
