"""
Centralized formatting utilities for the console UI.
"""
import json
from typing import Any, Optional

import pandas as pd

ID_FIELD = "_id"

DEFAULT_NEW_DOCUMENT = {
    "name": "Example",
    "value": 123,
    "active": True,
}


def format_bytes(size: Optional[float]) -> str:
    """Format a byte count with B/KB/MB/GB units."""
    try:
        if not size:
            return "0 B"
        units = ["B", "KB", "MB", "GB"]
        value = float(size)
        unit = 0
        while value >= 1024 and unit < len(units) - 1:
            value /= 1024
            unit += 1
        text = f"{value:.2f}".rstrip("0").rstrip(".")
        return f"{text} {units[unit]}"
    except (TypeError, ValueError):
        return "-"


def format_json(value: Any) -> str:
    """Pretty-print a JSON value for display and editing."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def strip_identifier(document: dict) -> dict:
    """Copy of a document without its _id, so saving it creates a new document."""
    return {key: value for key, value in document.items() if key != ID_FIELD}


def parse_document_text(text: str) -> dict:
    """
    Parse the JSON typed in a document editor.

    Raises:
        ValueError: The text is not valid JSON or not a JSON object
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    if not isinstance(document, dict):
        raise ValueError("A document must be a JSON object")
    return document


def document_id(document: dict) -> Optional[str]:
    """The _id of a document as it appears in API paths."""
    value = document.get(ID_FIELD)
    if value is None:
        return None
    if isinstance(value, dict) and "$oid" in value:
        return str(value["$oid"])
    return str(value)


def documents_to_dataframe(documents: list[dict]) -> pd.DataFrame:
    """Flatten nested documents into a table, one dotted column per leaf field."""
    if not documents:
        return pd.DataFrame()
    df = pd.json_normalize(documents)
    # Arrays stay as JSON text so mixed types render in one column
    for column in df.columns:
        if df[column].map(lambda v: isinstance(v, (list, dict))).any():
            df[column] = df[column].map(
                lambda v: json.dumps(v, ensure_ascii=False) if isinstance(v, (list, dict)) else v
            )
    if ID_FIELD in df.columns:
        df = df[[ID_FIELD] + [c for c in df.columns if c != ID_FIELD]]
    return df
