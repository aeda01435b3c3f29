"""Markdown README parser producing a catalog."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from catalog_browser.core import Catalog, CatalogParser, Category, Item

logger = logging.getLogger(__name__)

LIST_TYPES = ("bullet_list", "ordered_list")
DESCRIPTION_SEPARATORS = "-:\u2013\u2014"


@dataclass
class _CategoryDraft:
    """Category being filled while walking the document."""
    
    title: str
    items: list[Item] = field(default_factory=list)
    
    def freeze(self) -> Category:
        return Category(title=self.title, items=tuple(self.items))


@dataclass
class _ParseState:
    """Fold state threaded through the block traversal."""
    
    current: Optional[_CategoryDraft] = None
    categories: list[Category] = field(default_factory=list)
    
    def close_current(self) -> None:
        if self.current is not None:
            self.categories.append(self.current.freeze())
            self.current = None


class MarkdownCatalogParser(CatalogParser):
    """Turn level-2 sections with link lists into categories of items.
    
    Only top-level blocks are visited. A level-2 heading opens a category,
    list entries starting with a link become items of the open category,
    everything else is ignored. Malformed entries are skipped, never raised.
    """
    
    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark")
        # Store link targets as written; validateLink still rejects unsafe schemes
        self._md.normalizeLink = lambda url: url
    
    def parse(self, document: str) -> Catalog:
        """Parse document text into a catalog in document order."""
        root = SyntaxTreeNode(self._md.parse(document))
        state = _ParseState()
        
        for node in root.children:
            if node.type == "heading":
                self._on_heading(state, node)
            elif node.type in LIST_TYPES:
                self._on_list(state, node)
        
        state.close_current()
        
        catalog = Catalog(categories=tuple(state.categories))
        logger.debug(
            "Parsed %d categories, %d items", len(catalog.categories), len(catalog)
        )
        return catalog
    
    def _on_heading(self, state: _ParseState, node: SyntaxTreeNode) -> None:
        if node.tag != "h2":
            return
        
        title = self._heading_title(node)
        if not title:
            logger.debug("Skipping level-2 heading without text")
            return
        
        state.close_current()
        state.current = _CategoryDraft(title=title)
    
    def _on_list(self, state: _ParseState, node: SyntaxTreeNode) -> None:
        if state.current is None:
            # Preamble or table of contents
            return
        
        for entry in node.children:
            item = self._parse_entry(entry, state.current.title)
            if item is not None:
                state.current.items.append(item)
    
    def _parse_entry(self, entry: SyntaxTreeNode, category: str) -> Optional[Item]:
        """Build an item from a list entry, or None if it is malformed."""
        runs = self._first_paragraph_runs(entry)
        if not runs or runs[0].type != "link":
            logger.debug("Skipping list entry without leading link in '%s'", category)
            return None
        
        link = runs[0]
        title = self._text_of(link).strip()
        if not title:
            logger.debug("Skipping link without visible text in '%s'", category)
            return None
        
        description = self._clean_description(self._description_text(runs[1:]))
        
        return Item(
            title=title,
            url=str(link.attrs.get("href", "")),
            category=category,
            description=description,
        )
    
    def _description_text(self, runs: list[SyntaxTreeNode]) -> str:
        """Text of the run after the link plus any plain text continuing it."""
        if not runs:
            return ""
        
        parts = [self._text_of(runs[0])]
        for run in runs[1:]:
            if run.type == "text":
                parts.append(run.content)
            elif run.type == "softbreak":
                parts.append("\n")
            else:
                break
        return "".join(parts)
    
    def _first_paragraph_runs(self, entry: SyntaxTreeNode) -> list[SyntaxTreeNode]:
        if not entry.children or entry.children[0].type != "paragraph":
            return []
        
        paragraph = entry.children[0]
        if not paragraph.children:
            return []
        
        return list(paragraph.children[0].children)
    
    def _heading_title(self, node: SyntaxTreeNode) -> str:
        if not node.children:
            return ""
        
        inline = node.children[0]
        if inline.children:
            first = self._text_of(inline.children[0]).strip()
            if first:
                return first
        
        return self._text_of(inline).strip()
    
    def _text_of(self, node: SyntaxTreeNode) -> str:
        """Concatenated visible text of a node and its descendants."""
        if node.type in ("text", "code_inline"):
            return node.content
        if node.type in ("softbreak", "hardbreak"):
            return " "
        return "".join(self._text_of(child) for child in node.children)
    
    @staticmethod
    def _clean_description(text: str) -> str:
        """Trim whitespace and a leading separator such as ' - '."""
        text = text.strip()
        if text[:1] and text[0] in DESCRIPTION_SEPARATORS and text[1:2].isspace():
            text = text[1:].strip()
        return text
