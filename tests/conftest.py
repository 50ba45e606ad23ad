"""Shared test fixtures for wikilinks."""

from __future__ import annotations

from typing import Any

import pytest


def make_chapter(
    name: str = "Intro",
    content: Any = "",
    sub_items: list[Any] | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """Factory for mdBook chapter items as JSON values."""
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": kwargs.pop("number", [1]),
            "sub_items": sub_items if sub_items is not None else [],
            "path": kwargs.pop("path", f"{name.lower()}.md"),
            "source_path": kwargs.pop("source_path", f"{name.lower()}.md"),
            "parent_names": kwargs.pop("parent_names", []),
            **kwargs,
        }
    }


@pytest.fixture()
def book_payload() -> dict[str, Any]:
    """A small book with nested chapters, a separator and a part title."""
    return {
        "sections": [
            {"PartTitle": "Guide"},
            make_chapter(
                name="Intro",
                content="See [[setup#First Steps|setup]] and [[faq]].",
                sub_items=[
                    make_chapter(name="Details", content="Back to [[intro]]", number=[1, 1]),
                    "Separator",
                ],
            ),
            "Separator",
            make_chapter(name="Plain", content="No links here.", number=[2]),
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture()
def context() -> dict[str, Any]:
    """Renderer context as mdBook sends it."""
    return {
        "root": "/tmp/book",
        "config": {
            "book": {"authors": [], "language": "en", "src": "src"},
            "preprocessor": {"wikilinks": {"command": "mdbook-wikilinks"}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.40",
    }
