"""View renderers."""

from catalog_browser.adapters.rendering.markdown_renderer import MarkdownViewRenderer

__all__ = ["MarkdownViewRenderer"]
