"""Rewrite wiki-style [[links]] in mdBook chapters into standard Markdown links."""

__version__ = "0.1.0"
