"""Error hierarchy for wikilinks."""

from __future__ import annotations


class WikilinksError(Exception):
    """Base exception for all wikilinks errors."""

    pass


class ConfigError(WikilinksError):
    """Configuration loading or validation error."""

    pass


class ParseError(WikilinksError):
    """Input stream is not well-formed JSON."""

    pass


class InvalidInputShapeError(WikilinksError):
    """Top-level input is neither a [context, book] pair nor an object with a book."""

    pass


class StreamIOError(WikilinksError):
    """Failed to read standard input or write standard output."""

    pass
