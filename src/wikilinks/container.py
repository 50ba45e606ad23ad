"""Dependency injection container for wikilinks."""

from __future__ import annotations

from dataclasses import dataclass

from wikilinks.config import WikilinksConfig
from wikilinks.core.interfaces import TextTransformPort


@dataclass
class Container:
    """DI container holding the configuration and the chapter transform."""

    config: WikilinksConfig
    transform: TextTransformPort

    @staticmethod
    def create_default(config: WikilinksConfig) -> Container:
        """Create a container with the production link rewriter."""
        from wikilinks.adapters.link_rewriter import LinkRewriter

        transform = LinkRewriter(
            extension=config.link_extension,
            separator=config.anchor_separator,
        )
        return Container(config=config, transform=transform)

    @staticmethod
    def create_for_testing(
        config: WikilinksConfig | None = None,
        transform: TextTransformPort | None = None,
    ) -> Container:
        """Create a container with test/mock adapters.

        Both parameters are optional. The default transform raises if it is
        called without being replaced.
        """
        if config is None:
            config = WikilinksConfig()

        class StubTransform(TextTransformPort):
            def transform(self, text: str) -> tuple[str, int]:
                raise NotImplementedError("Provide a mock transform")

        return Container(config=config, transform=transform or StubTransform())
