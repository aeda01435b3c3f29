"""Source adapters for fetching the catalog document."""

from catalog_browser.adapters.sources.file_source import FileDocumentSource
from catalog_browser.adapters.sources.readme_source import DEFAULT_README_URL, ReadmeSource

__all__ = ["DEFAULT_README_URL", "FileDocumentSource", "ReadmeSource"]
