"""
JSON rendering of extracted records.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from novelupdates.errors import EncodingError

DEFAULT_INDENT = 2
MAX_INDENT = 8


def resolve_indent(indent: Any = None) -> int:
    """Number of spaces per nesting level.

    Integers from 1 to ``MAX_INDENT`` are used as given; anything else,
    including booleans and None, falls back to ``DEFAULT_INDENT``.
    """
    if isinstance(indent, int) and not isinstance(indent, bool):
        if 0 < indent <= MAX_INDENT:
            return indent
    return DEFAULT_INDENT


def to_data(value: Any) -> Any:
    """Convert records (or sequences of records) into plain JSON data.

    Dataclasses become dicts keyed by field name, tuples become lists.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_data(getattr(value, f.name)) for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {k: to_data(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_data(v) for v in value]
    return value


def to_json(value: Any, indent: Any = None) -> bytes:
    """Render a record, a sequence of records, or plain data as JSON.

    Field names are the record attribute names; absent values render as
    ``null`` and empty sequences as ``[]``. Non-ASCII text is kept as-is.

    Args:
        value: A SearchRecord, SeriesRecord, a sequence of them, or any
            JSON-compatible value.
        indent: Spaces per level, see :func:`resolve_indent`.

    Returns:
        UTF-8 encoded JSON.

    Raises:
        EncodingError: If the value cannot be serialized.
    """
    try:
        text = json.dumps(
            to_data(value),
            indent=resolve_indent(indent),
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise EncodingError(
            f"cannot encode {type(value).__name__} as JSON: {exc}"
        ) from exc
    return text.encode("utf-8")
