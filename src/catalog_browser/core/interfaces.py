"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from catalog_browser.core.entities import Catalog, View


class DocumentSource(ABC):
    """Interface for retrieving the raw catalog document."""
    
    @abstractmethod
    async def fetch_document(self) -> str:
        """Fetch the document text.
        
        Raises:
            FetchError: transport failure or non-2xx response
            DecodeError: body is not valid text
        """
        pass


class CatalogParser(ABC):
    """Interface for turning document text into a catalog."""
    
    @abstractmethod
    def parse(self, document: str) -> Catalog:
        """Parse document text. Must not raise on malformed content."""
        pass


class ViewRenderer(ABC):
    """Interface for presenting a view."""
    
    @abstractmethod
    def render(self, view: View) -> str:
        """Render view to text."""
        pass
