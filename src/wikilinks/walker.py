"""Tree walker: applies a text transform to every chapter of a book."""

from __future__ import annotations

import logging

from wikilinks.adapters.link_rewriter import LinkRewriter
from wikilinks.core.interfaces import TextTransformPort
from wikilinks.core.models import Book, BookItem, ChapterItem

logger = logging.getLogger(__name__)


def rewrite_chapter_content(
    item: BookItem, transform: TextTransformPort | None = None
) -> BookItem:
    """Rewrite a chapter's content and, depth-first, that of all its sub-items.

    Non-chapter items are returned untouched. The item is mutated in place
    and returned for convenience.
    """
    if not isinstance(item, ChapterItem):
        return item

    transform = transform or LinkRewriter()
    chapter = item.chapter

    if chapter.content is not None:
        chapter.content, count = transform.transform(chapter.content)
        if count:
            logger.debug("Rewrote %d link(s) in chapter %r", count, chapter.label)

    if chapter.sub_items is not None:
        for sub_item in chapter.sub_items:
            rewrite_chapter_content(sub_item, transform)

    return item


def rewrite_book(book: Book, transform: TextTransformPort | None = None) -> Book:
    """Rewrite every chapter of the book, in order."""
    if book.sections is None:
        logger.debug("Book has no sections list; leaving it unchanged")
        return book

    transform = transform or LinkRewriter()
    for item in book.sections:
        rewrite_chapter_content(item, transform)
    return book
