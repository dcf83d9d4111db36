import logging
from abc import ABC, abstractmethod

import httpx

from ..types import ResultLocator

logger = logging.getLogger(__name__)

# Google Custom Search returns at most 10 items per request
SEARCH_PAGE_SIZE = 10


class SearchProvider(ABC):
    """Looks up ordered result locators for a query."""

    @abstractmethod
    async def search(self, query: str, limit: int) -> list[ResultLocator]:
        """Return at most ``limit`` locators; never raises on backend failure."""


class GoogleSearchProvider(SearchProvider):
    """Search through the Google Custom Search JSON API."""

    endpoint = "https://www.googleapis.com/customsearch/v1"

    def __init__(
        self,
        api_key: str,
        cx: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.cx = cx
        self.timeout = timeout
        self.transport = transport

    async def search(self, query: str, limit: int) -> list[ResultLocator]:
        """
        Perform a web search using the Google Custom Search API.

        Args:
            query: The search query string
            limit: Maximum number of locators to return

        Returns:
            Locators in backend order, or an empty list if the search failed

        Raises:
            ValueError: If the query is empty or limit is below 1
        """
        if not query.strip():
            raise ValueError("query must not be empty")
        if limit < 1:
            raise ValueError("limit must be at least 1")

        if not self.api_key or not self.cx:
            logger.error(
                "❌ Google Search Error: GOOGLE_API_KEY and GOOGLE_CX are required"
            )
            return []

        params = {
            "q": query,
            "key": self.api_key,
            "cx": self.cx,
            "num": str(SEARCH_PAGE_SIZE),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.endpoint, params=params)
                response.raise_for_status()
                data = response.json()

            items = data.get("items") or []
            return extract_locators(items, limit)

        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ Google Search Error: status {e.response.status_code}: {e.response.text}"
            )
        except Exception as e:
            logger.error(f"❌ Google Search Error: {e}")
        return []


def extract_locators(items: list, limit: int) -> list[ResultLocator]:
    """Map raw items to locators, skipping any without an http(s) link."""
    results: list[ResultLocator] = []
    for item in items:
        if len(results) >= limit:
            break
        if not isinstance(item, dict):
            continue
        link = item.get("link") or ""
        if not isinstance(link, str) or not link.startswith(("http://", "https://")):
            continue
        results.append(ResultLocator(title=str(item.get("title") or ""), link=link))
    return results
