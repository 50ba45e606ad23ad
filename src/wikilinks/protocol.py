"""Protocol adapter for the mdBook preprocessor exchange.

mdBook writes either a ``[context, book]`` array or an object holding a
``"book"`` key to the preprocessor's stdin, and expects the book alone
back on stdout.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from wikilinks.core.errors import InvalidInputShapeError, ParseError

logger = logging.getLogger(__name__)

PREPROCESSOR_NAME = "wikilinks"

_JSON_TYPE_NAMES: list[tuple[type, str]] = [
    (str, "string"),
    (bool, "boolean"),
    (int, "number"),
    (float, "number"),
]


def parse_input(raw: str) -> Any:
    """Parse the raw stdin text as JSON.

    Raises:
        ParseError: If the text is not well-formed JSON.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON input: {e}") from e


def split_envelope(data: Any) -> tuple[dict[str, Any], Any]:
    """Separate the renderer context from the book payload.

    Returns:
        ``(context, book)``. The context is element 0 of the array form, or
        the object form minus its ``"book"`` key; it is empty when the array
        form carries a non-object context.

    Raises:
        InvalidInputShapeError: If ``data`` is an array whose length is not 2,
            or neither an array nor an object with a ``"book"`` key.
    """
    if isinstance(data, list):
        if len(data) != 2:
            raise InvalidInputShapeError(f"Expected array of length 2, got {len(data)}")
        logger.debug("Detected [context, book] array envelope")
        context = data[0] if isinstance(data[0], dict) else {}
        return context, data[1]

    if isinstance(data, dict) and "book" in data:
        logger.debug("Detected object envelope with 'book' key")
        context = {k: v for k, v in data.items() if k != "book"}
        return context, data["book"]

    raise InvalidInputShapeError(
        "Unexpected input format: expected an array of length 2 or an object "
        f"with a 'book' key, got {_describe(data)}"
    )


def preprocessor_options(context: dict[str, Any], name: str = PREPROCESSOR_NAME) -> dict[str, Any]:
    """Return the ``[preprocessor.<name>]`` table from the renderer context."""
    table: Any = context
    for key in ("config", "preprocessor", name):
        if not isinstance(table, dict):
            return {}
        table = table.get(key)
    return table if isinstance(table, dict) else {}


def serialize_book(book: Any) -> str:
    """Serialize the book payload as compact JSON."""
    return json.dumps(book, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ParseError(f"Invalid JSON input: {name}")


def _describe(data: Any) -> str:
    if isinstance(data, dict):
        return "an object without a 'book' key"
    if data is None:
        return "null"
    for json_type, name in _JSON_TYPE_NAMES:
        if isinstance(data, json_type):
            return f"a {name}"
    return type(data).__name__
