"""Link rewriter: turns [[wiki links]] into standard Markdown links.

Supported variants:

    [[target#Section|text]]  ->  [text](target.md#section)
    [[target#Section]]       ->  [target](target.md#section)
    [[target|text]]          ->  [text](target.md)
    [[target]]               ->  [target](target.md)
"""

from __future__ import annotations

import re

from wikilinks.core.interfaces import TextTransformPort

# [[target#section|display]]; first "]" always closes the display text
_WIKILINK_PATTERN = re.compile(
    r"\[\[(\s*[^#|\]\s][^#|\]]*)"  # target, not blank
    r"(?:#([^#|\]]+))?"  # section
    r"(?:\|([^\]]+))?"  # display text
    r"\]\]"
)

DEFAULT_EXTENSION = ".md"
DEFAULT_SEPARATOR = "-"


def normalize_anchor(label: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Lowercase a section label and join its words with ``separator``.

    Spaces and underscores both become the separator, other punctuation
    is left alone: ``"Hello World_Example"`` gives ``"hello-world-example"``.
    """
    return label.lower().replace(" ", separator).replace("_", separator)


class LinkRewriter(TextTransformPort):
    """Rewrites every wiki link in a text in a single left-to-right pass."""

    def __init__(
        self,
        extension: str = DEFAULT_EXTENSION,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self._extension = extension
        self._separator = separator

    def rewrite(self, text: str) -> str:
        """Return ``text`` with all wiki links replaced."""
        return self.transform(text)[0]

    def transform(self, text: str) -> tuple[str, int]:
        return _WIKILINK_PATTERN.subn(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        target, section, text = match.groups()
        target = target.strip()
        display = text.strip() if text is not None else target

        anchor = ""
        if section is not None:
            anchor = "#" + normalize_anchor(section.strip(), self._separator)

        return f"[{display}]({target}{self._extension}{anchor})"


_default_rewriter = LinkRewriter()


def rewrite_links(text: str) -> str:
    """Rewrite wiki links using the default extension and separator."""
    return _default_rewriter.rewrite(text)
