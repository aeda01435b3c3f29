"""Document parsers."""

from catalog_browser.adapters.parsing.markdown_parser import MarkdownCatalogParser

__all__ = ["MarkdownCatalogParser"]
