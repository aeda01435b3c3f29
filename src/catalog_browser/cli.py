"""CLI entry point for catalog browser."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from catalog_browser.adapters.parsing import MarkdownCatalogParser
from catalog_browser.adapters.rendering import MarkdownViewRenderer
from catalog_browser.adapters.sources import FileDocumentSource, ReadmeSource
from catalog_browser.config import get_settings
from catalog_browser.core import DocumentSource, Failed, QueryState, SortKey
from catalog_browser.core.query_engine import use_system_collation
from catalog_browser.use_cases import CatalogBrowser, CatalogService


def main(
    url: Optional[str] = typer.Option(None, "--url", help="Document URL (overrides config)"),
    file: Optional[Path] = typer.Option(None, "--file", help="Read document from a local file"),
    search: str = typer.Option("", "--search", "-s", help="Filter by title or description"),
    category: Optional[list[str]] = typer.Option(None, "--category", "-c", help="Category to include (repeatable)"),
    sort: Optional[SortKey] = typer.Option(None, "--sort", help="Sort by name or category"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Items per page"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    list_categories: bool = typer.Option(False, "--list-categories", help="Print category options and exit"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
) -> None:
    """Browse a markdown link catalog with search, filters and pagination."""
    if not use_system_collation():
        print("⚠️  Локаль сортировки недоступна, используется порядок кодов символов")
    
    exit_code = asyncio.run(
        async_run(url, file, search, category or [], sort, page_size, page, list_categories, config)
    )
    if exit_code:
        raise typer.Exit(code=exit_code)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(
    url: Optional[str],
    file: Optional[Path],
    search: str,
    categories: list[str],
    sort: Optional[SortKey],
    page_size: Optional[int],
    page: int,
    list_categories: bool,
    config_path: Path,
) -> int:
    """Async implementation of the browse command. Returns exit code."""
    settings = get_settings(config_path)
    
    source: DocumentSource
    if file is not None:
        source = FileDocumentSource(file)
    else:
        source = ReadmeSource(url or settings.source_url, timeout=settings.source.timeout)
    
    service = CatalogService(
        source=source,
        parser=MarkdownCatalogParser(),
        excluded_titles=settings.excluded_titles,
    )
    
    load_state = await service.load()
    if isinstance(load_state, Failed):
        print("\n❌ Каталог не загружен")
        return 1
    
    browser = CatalogBrowser(load_state=load_state, debounce_ms=settings.debounce_ms)
    options = browser.category_options
    
    if list_categories:
        print()
        for title in options:
            print(f"  • {title}")
        browser.close()
        return 0
    
    unknown = [c for c in categories if c not in options]
    if unknown:
        print(f"  ⚠️  Неизвестные категории: {', '.join(unknown)}")
    
    size = page_size or settings.page_size
    if size not in settings.browser.page_size_options:
        print(f"  ⚠️  Нестандартный размер страницы: {size}")
    
    browser.state = QueryState(
        search_text=search,
        selected_categories=frozenset(categories),
        sort_key=sort or SortKey(settings.browser.sort_key),
        page_size=size,
        page_number=page,
    )
    view = browser.view
    browser.close()
    
    print()
    print(MarkdownViewRenderer().render(view))
    return 0


if __name__ == "__main__":
    app()
