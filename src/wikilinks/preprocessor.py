"""One preprocessor invocation: read the envelope, rewrite the book, write it back."""

from __future__ import annotations

import logging
from typing import IO, Any

from wikilinks.container import Container
from wikilinks.core.errors import ParseError, StreamIOError
from wikilinks.core.models import Book
from wikilinks.protocol import parse_input, serialize_book, split_envelope
from wikilinks.walker import rewrite_book

logger = logging.getLogger(__name__)


def read_input(stream: IO[bytes]) -> str:
    """Read the whole input stream and decode it as UTF-8.

    Raises:
        StreamIOError: If the stream cannot be read.
        ParseError: If the bytes are not valid UTF-8.
    """
    try:
        data = stream.read()
    except OSError as e:
        raise StreamIOError(f"Cannot read input: {e}") from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Input is not valid UTF-8: {e}") from e


def write_output(stream: IO[bytes], text: str) -> None:
    """Write the serialized book to the output stream.

    Raises:
        StreamIOError: If the stream cannot be written.
    """
    try:
        stream.write(text.encode("utf-8"))
        stream.flush()
    except OSError as e:
        raise StreamIOError(f"Cannot write output: {e}") from e


def read_envelope(raw: str) -> tuple[dict[str, Any], Any]:
    """Parse the input text and split it into renderer context and book payload."""
    return split_envelope(parse_input(raw))


def run(container: Container, payload: Any) -> str:
    """Rewrite every chapter of the book payload and serialize the result."""
    book = Book.from_json(payload)
    rewrite_book(book, container.transform)
    return serialize_book(book.to_json())

