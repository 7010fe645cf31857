"""
Conversion between JSON payloads and BSON documents.

Documents have no fixed schema, so they travel as plain recursive JSON
values. Inbound JSON is read as MongoDB Extended JSON so callers can spell
``{"$oid": "..."}`` or ``{"$date": ...}``; outbound BSON types are flattened
to plain JSON (ObjectId as hex string, datetime as ISO 8601).
"""
import base64
import json
from datetime import datetime
from typing import Any, Union

from bson import ObjectId, json_util
from bson.decimal128 import Decimal128
from bson.errors import BSONError

from mongo_manager.core.exceptions import InvalidDocumentError, InvalidFilterError

JSONValue = Union[None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]]


def encode_value(value: Any) -> JSONValue:
    """Convert a BSON value (as returned by the driver) into plain JSON."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, dict):
        return {str(key): encode_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal128):
        return str(value)
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    # Timestamp, Regex, MinKey, ... keep their relaxed Extended JSON shape
    return json.loads(json_util.dumps(value))


def to_bson(value: JSONValue) -> Any:
    """Read a JSON value as Extended JSON so ``$oid``/``$date`` wrappers become BSON types."""
    try:
        return json_util.loads(json.dumps(value))
    except (ValueError, TypeError, BSONError) as e:
        raise InvalidDocumentError(f"Invalid document: {e}") from e


def parse_filter(text: str | None) -> dict[str, Any]:
    """
    Parse query filter text into a filter document.

    Blank text means the empty filter. Anything that is not a JSON object
    raises InvalidFilterError.
    """
    if text is None or not text.strip():
        return {}

    try:
        parsed = json_util.loads(text)
    except (ValueError, TypeError, BSONError) as e:
        raise InvalidFilterError(f"Invalid query filter: {e}") from e

    if not isinstance(parsed, dict):
        raise InvalidFilterError("Invalid query filter: expected a JSON object")

    return parsed


def document_id_candidates(doc_id: str) -> list[Any]:
    """
    Possible ``_id`` values for an identifier taken from a URL path.

    The path only carries text, so a document created with an ObjectId, a
    string or an integer key must all remain addressable.
    """
    candidates: list[Any] = []
    if ObjectId.is_valid(doc_id):
        candidates.append(ObjectId(doc_id))
    candidates.append(doc_id)
    try:
        number = int(doc_id)
    except ValueError:
        pass
    else:
        candidates.append(number)
    return candidates
