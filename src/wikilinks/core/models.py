"""Domain models for the mdBook book tree.

The JSON book is decoded once into these models and encoded back out after
rewriting. Only chapter ``content`` strings are ever replaced; every other
key keeps its value and its position in the mapping.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class OtherItem(BaseModel):
    """A non-chapter book item (separator, part title, ...), kept exactly as read."""

    raw: Any = Field(description="Item value as read from the book")

    def to_json(self) -> Any:
        return self.raw


class Chapter(BaseModel):
    """A chapter with rewritable content and nested sub-items."""

    raw: dict[str, Any] = Field(
        default_factory=dict, description="Chapter mapping as read, in key order"
    )
    content: str | None = Field(default=None, description="Markdown source, if textual")
    sub_items: list[BookItem] | None = Field(
        default=None, description="Nested items, if the chapter carries a list"
    )

    @property
    def name(self) -> str | None:
        """Chapter title, if the book provides one."""
        name = self.raw.get("name")
        return name if isinstance(name, str) else None

    @property
    def label(self) -> str | None:
        """Name of the chapter for log messages, falling back to its path."""
        for key in ("name", "path", "source_path"):
            value = self.raw.get(key)
            if isinstance(value, str) and value:
                return value
        return None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Chapter:
        content = data.get("content")
        sub_items = data.get("sub_items")
        return cls(
            raw=data,
            content=content if isinstance(content, str) else None,
            sub_items=[decode_item(i) for i in sub_items] if isinstance(sub_items, list) else None,
        )

    def to_json(self) -> dict[str, Any]:
        data = dict(self.raw)
        if self.content is not None:
            data["content"] = self.content
        if self.sub_items is not None:
            data["sub_items"] = [item.to_json() for item in self.sub_items]
        return data


class ChapterItem(BaseModel):
    """The ``{"Chapter": {...}}`` variant of a book item."""

    raw: dict[str, Any] = Field(default_factory=dict, description="Item mapping as read")
    chapter: Chapter

    def to_json(self) -> dict[str, Any]:
        data = dict(self.raw)
        data["Chapter"] = self.chapter.to_json()
        return data


BookItem = ChapterItem | OtherItem
"""A single entry of a book's item sequence."""

Chapter.model_rebuild()
ChapterItem.model_rebuild()


class Book(BaseModel):
    """The book payload handed over by mdBook."""

    raw: Any = Field(default=None, description="Book payload as read")
    sections: list[BookItem] | None = Field(
        default=None, description="Top-level items, if the payload carries a list"
    )

    @classmethod
    def from_json(cls, data: Any) -> Book:
        sections = data.get("sections") if isinstance(data, dict) else None
        return cls(
            raw=data,
            sections=[decode_item(i) for i in sections] if isinstance(sections, list) else None,
        )

    def to_json(self) -> Any:
        if self.sections is None:
            return self.raw
        data = dict(self.raw)
        data["sections"] = [item.to_json() for item in self.sections]
        return data


def decode_item(data: Any) -> BookItem:
    """Decode one book item into its chapter or pass-through variant."""
    if isinstance(data, dict) and isinstance(data.get("Chapter"), dict):
        return ChapterItem(raw=data, chapter=Chapter.from_json(data["Chapter"]))
    return OtherItem(raw=data)
