"""Markdown renderer for catalog views."""

from catalog_browser.core import Item, View, ViewRenderer


class MarkdownViewRenderer(ViewRenderer):
    """Render one page of a view as markdown."""
    
    def __init__(self, title: str = "Catalog") -> None:
        self.title = title
    
    def render(self, view: View) -> str:
        """Render page items followed by the pagination footer."""
        lines = [
            f"# {self.title}",
            "",
        ]
        
        if not view.items:
            lines.append("No items found.")
            lines.append("")
            lines.extend(self._format_footer(view))
            return "\n".join(lines)
        
        for item in view.items:
            lines.extend(self._format_item(item))
        
        lines.extend(self._format_footer(view))
        return "\n".join(lines)
    
    def _format_item(self, item: Item) -> list[str]:
        """Format single item card."""
        lines = [
            f"### [{item.title}]({item.url})",
            "",
        ]
        
        if item.description:
            lines.extend([item.description, ""])
        
        lines.extend([f"*{item.category}*", "", "---", ""])
        return lines
    
    def _format_footer(self, view: View) -> list[str]:
        return [
            f"Showing {view.start_index} - {view.end_index} of {view.total_count} items",
            "",
            f"Page {view.current_page} of {view.total_pages}",
        ]
