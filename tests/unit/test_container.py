"""Tests for DI container."""

from __future__ import annotations

import pytest

from wikilinks.adapters.link_rewriter import LinkRewriter
from wikilinks.config import WikilinksConfig
from wikilinks.container import Container


class TestContainer:
    """Tests for Container factories."""

    def test_create_default(self) -> None:
        container = Container.create_default(WikilinksConfig())
        assert isinstance(container.transform, LinkRewriter)
        assert container.transform.transform("[[a#B c]]") == ("[a](a.md#b-c)", 1)

    def test_create_default_applies_config(self) -> None:
        config = WikilinksConfig(link_extension=".html", anchor_separator="_")
        container = Container.create_default(config)
        assert container.config is config
        assert container.transform.transform("[[a#B c]]") == ("[a](a.html#b_c)", 1)

    def test_create_for_testing_defaults(self) -> None:
        container = Container.create_for_testing()
        assert container.config == WikilinksConfig()

    def test_create_for_testing_stub_raises(self) -> None:
        container = Container.create_for_testing()
        with pytest.raises(NotImplementedError):
            container.transform.transform("text")

    def test_create_for_testing_with_transform(self) -> None:
        rewriter = LinkRewriter()
        container = Container.create_for_testing(transform=rewriter)
        assert container.transform is rewriter
