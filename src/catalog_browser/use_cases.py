"""Business logic use cases."""

import dataclasses
from typing import Callable, Iterable, Optional

from catalog_browser.core import (
    Catalog,
    CatalogError,
    CatalogParser,
    DebounceScheduler,
    DocumentSource,
    Failed,
    Loading,
    LoadState,
    QueryState,
    Ready,
    SortKey,
    View,
    derive_view,
)


class CatalogService:
    """Service for fetching and parsing the catalog document."""
    
    def __init__(
        self,
        source: DocumentSource,
        parser: CatalogParser,
        excluded_titles: Optional[Iterable[str]] = None,
        verbose: bool = True,
    ) -> None:
        self.source = source
        self.parser = parser
        self.excluded_titles = list(excluded_titles or [])
        self.verbose = verbose
    
    async def load(self) -> LoadState:
        """Fetch and parse the document once.
        
        Returns:
            Ready with the catalog, or Failed with the fetch/decode error
        """
        emoji = getattr(self.source, "emoji", "📥")
        name = getattr(self.source, "name", self.source.__class__.__name__)
        self._log(f"\n{emoji} Загрузка: {name}")
        
        try:
            document = await self.source.fetch_document()
        except CatalogError as e:
            self._log(f"  └─ ❌ Ошибка: {e}")
            return Failed(error=e)
        
        catalog = self.parser.parse(document).without_titles(self.excluded_titles)
        
        self._log(f"  └─ Категорий: {len(catalog.categories)}")
        self._log(f"  └─ Элементов: {len(catalog)}")
        return Ready(catalog=catalog)
    
    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)


class CatalogBrowser:
    """Query state holder that recomputes the view on every mutation.
    
    Search text goes through a debounce scheduler, all other mutations apply
    immediately. Any change to filters, sort or page size sends the page back
    to 1.
    """
    
    def __init__(
        self,
        load_state: LoadState = Loading(),
        state: Optional[QueryState] = None,
        debounce_ms: int = 300,
        on_view: Optional[Callable[[Optional[View]], None]] = None,
    ) -> None:
        self.load_state = load_state
        self.state = state or QueryState()
        self.on_view = on_view
        self._search = DebounceScheduler(self._apply_search_text, debounce_ms)
        self._cache_catalog: Optional[Catalog] = None
        self._cache_state: Optional[QueryState] = None
        self._cache_view: Optional[View] = None
    
    @property
    def is_loading(self) -> bool:
        return isinstance(self.load_state, Loading)
    
    @property
    def category_options(self) -> list[str]:
        """Category filter options in first-seen order."""
        if isinstance(self.load_state, Ready):
            return self.load_state.catalog.category_titles()
        return []
    
    @property
    def view(self) -> Optional[View]:
        """Current view; None unless the catalog is ready."""
        if not isinstance(self.load_state, Ready):
            return None
        
        catalog = self.load_state.catalog
        if catalog is not self._cache_catalog or self.state != self._cache_state:
            self._cache_view = derive_view(catalog.items, self.state)
            self._cache_catalog = catalog
            self._cache_state = self.state
        return self._cache_view
    
    def set_catalog(self, load_state: LoadState) -> None:
        """Replace the catalog wholesale."""
        self.load_state = load_state
        self._update(page_number=1)
    
    def set_search_text(self, text: str) -> None:
        """Debounced; the view updates once typing pauses."""
        self._search.schedule(text)
    
    def set_selected_categories(self, categories: Iterable[str]) -> None:
        self._update(selected_categories=frozenset(categories), page_number=1)
    
    def set_sort_key(self, sort_key: SortKey | str) -> None:
        self._update(sort_key=SortKey(sort_key), page_number=1)
    
    def set_page_size(self, page_size: int) -> None:
        self._update(page_size=page_size, page_number=1)
    
    def set_page_number(self, page_number: int) -> None:
        self._update(page_number=page_number)
    
    @property
    def search_pending(self) -> bool:
        return self._search.pending
    
    def close(self) -> None:
        """Cancel any pending search update."""
        self._search.close()
    
    def _apply_search_text(self, text: str) -> None:
        self._update(search_text=text, page_number=1)
    
    def _update(self, **changes) -> None:
        self.state = dataclasses.replace(self.state, **changes)
        if self.on_view is not None:
            self.on_view(self.view)
