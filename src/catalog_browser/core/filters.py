"""Shared filtering utilities for the query engine."""


def matches_search(title: str, description: str, query: str) -> bool:
    """
    Check if an item matches a free-text search query.
    
    Args:
        title: Title of the item
        description: Description of the item
        query: Text typed into the search field
        
    Returns:
        True if query is found in title or description (case-insensitive)
    """
    if not query:
        return True  # No filtering if no query provided
    
    needle = query.lower()
    return needle in title.lower() or needle in description.lower()


def in_categories(category: str, selected: frozenset[str]) -> bool:
    """Check category membership; an empty selection means all categories."""
    if not selected:
        return True
    
    return category in selected
