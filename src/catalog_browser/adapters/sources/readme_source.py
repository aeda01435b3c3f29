"""HTTP source for the catalog README."""

import logging

import httpx

from catalog_browser.core import DecodeError, DocumentSource, FetchError

logger = logging.getLogger(__name__)

DEFAULT_README_URL = (
    "https://raw.githubusercontent.com/birobirobiro/awesome-shadcn-ui/main/README.md"
)


class ReadmeSource(DocumentSource):
    """Fetch a markdown document from a fixed URL."""
    
    emoji = "🌐"
    name = "README (HTTP)"
    
    def __init__(self, url: str = DEFAULT_README_URL, timeout: float = 30.0) -> None:
        self.url = url
        self.timeout = timeout
    
    async def fetch_document(self) -> str:
        """Download the document once; no retry."""
        logger.debug("GET %s", self.url)
        
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(self.url)
            except httpx.HTTPError as e:
                raise FetchError(f"Request to {self.url} failed: {e}") from e
        
        if not 200 <= response.status_code < 300:
            raise FetchError(f"GET {self.url} returned HTTP {response.status_code}")
        
        return self._decode(response.content)
    
    def _decode(self, body: bytes) -> str:
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Body of {self.url} is not valid UTF-8: {e}") from e
