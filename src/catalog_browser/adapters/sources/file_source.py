"""Local file source, handy for offline use and tests."""

from pathlib import Path

from catalog_browser.core import DecodeError, DocumentSource, FetchError


class FileDocumentSource(DocumentSource):
    """Read the catalog document from disk."""
    
    emoji = "📁"
    name = "README (file)"
    
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
    
    async def fetch_document(self) -> str:
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise FetchError(f"Could not read {self.path}: {e}") from e
        
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"{self.path} is not valid UTF-8: {e}") from e
