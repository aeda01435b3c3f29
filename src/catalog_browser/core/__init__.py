"""Core domain layer."""

from catalog_browser.core.debounce import DebounceScheduler
from catalog_browser.core.entities import (
    Catalog,
    Category,
    Failed,
    Item,
    Loading,
    LoadState,
    QueryState,
    Ready,
    SortKey,
    View,
)
from catalog_browser.core.exceptions import CatalogError, DecodeError, FetchError
from catalog_browser.core.interfaces import CatalogParser, DocumentSource, ViewRenderer
from catalog_browser.core.query_engine import derive_view

__all__ = [
    "Item",
    "Category",
    "Catalog",
    "QueryState",
    "SortKey",
    "View",
    "Loading",
    "Ready",
    "Failed",
    "LoadState",
    "CatalogError",
    "FetchError",
    "DecodeError",
    "DocumentSource",
    "CatalogParser",
    "ViewRenderer",
    "DebounceScheduler",
    "derive_view",
]
