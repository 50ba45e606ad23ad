"""Port interfaces for wikilinks."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextTransformPort(ABC):
    """Port for rewriting the Markdown source of a single chapter."""

    @abstractmethod
    def transform(self, text: str) -> tuple[str, int]:
        """Rewrite a chapter's content.

        Args:
            text: Raw Markdown source.

        Returns:
            The rewritten text and the number of substitutions made.
        """
