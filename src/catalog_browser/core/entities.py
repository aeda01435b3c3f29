"""Core domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union


class SortKey(str, Enum):
    """Field the catalog view is ordered by."""
    
    NAME = "name"
    CATEGORY = "category"


@dataclass(frozen=True)
class Item:
    """Single catalog entry."""
    
    title: str
    url: str
    category: str
    description: str = ""
    
    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Title cannot be empty")


@dataclass(frozen=True)
class Category:
    """Named group of items from one level-2 section of the document."""
    
    title: str
    items: tuple[Item, ...] = ()
    
    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Category title cannot be empty")
        for item in self.items:
            if item.category != self.title:
                raise ValueError(
                    f"Item '{item.title}' belongs to '{item.category}', not '{self.title}'"
                )


@dataclass(frozen=True)
class Catalog:
    """Ordered categories produced by one parse of the document."""
    
    categories: tuple[Category, ...] = ()
    
    @property
    def items(self) -> tuple[Item, ...]:
        """All items, category order preserved."""
        return tuple(item for category in self.categories for item in category.items)
    
    def category_titles(self) -> list[str]:
        """Distinct category titles in first-seen order."""
        return list(dict.fromkeys(category.title for category in self.categories))
    
    def without_titles(self, titles: Iterable[str]) -> "Catalog":
        """Return a new catalog without items whose title is in `titles`."""
        excluded = set(titles)
        if not excluded:
            return self
        
        return Catalog(
            categories=tuple(
                Category(
                    title=category.title,
                    items=tuple(i for i in category.items if i.title not in excluded),
                )
                for category in self.categories
            )
        )
    
    def __len__(self) -> int:
        return sum(len(category.items) for category in self.categories)


@dataclass(frozen=True)
class QueryState:
    """Search, filter, sort and pagination inputs for one view computation."""
    
    search_text: str = ""
    selected_categories: frozenset[str] = field(default_factory=frozenset)
    sort_key: SortKey = SortKey.NAME
    page_size: int = 18
    page_number: int = 1
    
    def __post_init__(self) -> None:
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise ValueError("Page size must be an integer")
        if self.page_size <= 0:
            raise ValueError("Page size must be positive")
        # Coerce so callers may pass any iterable of titles or a plain string key
        if not isinstance(self.selected_categories, frozenset):
            object.__setattr__(self, "selected_categories", frozenset(self.selected_categories))
        if not isinstance(self.sort_key, SortKey):
            object.__setattr__(self, "sort_key", SortKey(self.sort_key))


@dataclass(frozen=True)
class View:
    """Filtered, sorted and paginated result of a query."""
    
    items: tuple[Item, ...]
    results: tuple[Item, ...]
    current_page: int
    total_pages: int
    page_size: int
    total_count: int
    
    @property
    def start_index(self) -> int:
        """1-based position of the first item on the page, 0 when empty."""
        if not self.items:
            return 0
        return (self.current_page - 1) * self.page_size + 1
    
    @property
    def end_index(self) -> int:
        """1-based position of the last item on the page, 0 when empty."""
        if not self.items:
            return 0
        return self.start_index + len(self.items) - 1
    
    @property
    def has_previous(self) -> bool:
        return self.current_page > 1
    
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class Loading:
    """Document fetch still outstanding."""


@dataclass(frozen=True)
class Ready:
    """Catalog loaded and parsed."""
    
    catalog: Catalog


@dataclass(frozen=True)
class Failed:
    """Fetch or decode failed; no catalog available."""
    
    error: Exception


LoadState = Union[Loading, Ready, Failed]
