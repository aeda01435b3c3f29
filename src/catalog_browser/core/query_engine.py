"""Derive filtered, sorted and paginated views from a catalog."""

import locale
import math
import unicodedata
from typing import Iterable, Sequence

from catalog_browser.core.entities import Item, QueryState, SortKey, View
from catalog_browser.core.filters import in_categories, matches_search


def collation_key(text: str) -> tuple[str, str]:
    """Locale-aware sort key.
    
    Primary level ignores case and accents, the raw text breaks ties so
    "apple" and "Apple" still get a fixed order.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return locale.strxfrm(base), locale.strxfrm(text)


def use_system_collation() -> bool:
    """Adopt the environment's collation locale for `collation_key`.
    
    Python starts in the C locale, which orders by code point. Returns False
    when the configured locale is not available.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        return False
    return True


def filter_by_text(items: Iterable[Item], search_text: str) -> list[Item]:
    """Keep items whose title or description contains the search text."""
    return [
        item for item in items
        if matches_search(item.title, item.description, search_text)
    ]


def filter_by_categories(items: Iterable[Item], selected: frozenset[str]) -> list[Item]:
    """Keep items belonging to one of the selected categories."""
    return [item for item in items if in_categories(item.category, selected)]


def sort_items(items: Iterable[Item], sort_key: SortKey) -> list[Item]:
    """Stable sort by title or by category."""
    if sort_key == SortKey.CATEGORY:
        return sorted(items, key=lambda item: collation_key(item.category))
    return sorted(items, key=lambda item: collation_key(item.title))


def paginate(items: Sequence[Item], page_size: int, page_number: int) -> View:
    """Slice a sorted sequence into the requested page.
    
    The page number is clamped to the available range; an empty sequence
    yields zero pages and an empty page 1.
    """
    if page_size <= 0:
        raise ValueError("Page size must be positive")
    
    total_count = len(items)
    total_pages = math.ceil(total_count / page_size)
    current_page = min(max(page_number, 1), max(total_pages, 1))
    
    start = (current_page - 1) * page_size
    page = tuple(items[start:start + page_size])
    
    return View(
        items=page,
        results=tuple(items),
        current_page=current_page,
        total_pages=total_pages,
        page_size=page_size,
        total_count=total_count,
    )


def derive_view(items: Iterable[Item], state: QueryState) -> View:
    """Apply text filter, category filter, sort and pagination in that order.
    
    Pure: the same items and state always give an equal view. Resetting the
    page number after a filter change is up to the caller.
    """
    filtered = filter_by_text(items, state.search_text)
    filtered = filter_by_categories(filtered, state.selected_categories)
    ordered = sort_items(filtered, state.sort_key)
    return paginate(ordered, state.page_size, state.page_number)
