"""
Web Content Fetcher

Fetches a page and extracts its paragraph text, either from the raw markup
or from a DOM rendered by a headless browser.
"""

import logging
from abc import ABC, abstractmethod

import httpx
from bs4 import BeautifulSoup
from playwright.async_api import async_playwright

from ..types import Excerpt
from .normalize import fetch_error, normalize_excerpt

logger = logging.getLogger(__name__)

# Same selection as the markup parser, run inside the rendered page
PARAGRAPH_SCRIPT = """() => Array.from(document.querySelectorAll('p'))
    .map(p => p.innerText)
    .join(' ')"""


class ContentFetcher(ABC):
    """Retrieves one page and reduces it to a bounded excerpt.

    Subclasses only extract text. Normalization and failure isolation happen
    here, so ``fetch`` never raises.
    """

    name: str = ""

    def __init__(self, timeout: float):
        self.timeout = timeout

    async def fetch(self, url: str) -> Excerpt:
        """
        Fetch a URL and return its excerpt.

        Args:
            url: The page to fetch

        Returns:
            Excerpt holding bounded text or one of the sentinel strings
        """
        try:
            text = await self._extract_text(url)
        except Exception as e:
            logger.warning(f"❌ Failed to fetch content from {url}: {e}")
            return fetch_error(url)

        logger.debug(f"  (Got {len(text)} content from {url})")
        return normalize_excerpt(url, text)

    @abstractmethod
    async def _extract_text(self, url: str) -> str:
        """Return the page's paragraph text joined with single spaces."""


class LightweightFetcher(ContentFetcher):
    """Plain HTTP GET plus markup parsing; scripts are never executed."""

    name = "lightweight"

    # Browser headers to avoid bot detection
    DEFAULT_HEADERS = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }

    def __init__(
        self,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(timeout)
        self.transport = transport

    async def _extract_text(self, url: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout, follow_redirects=True, transport=self.transport
        ) as client:
            response = await client.get(url, headers=self.DEFAULT_HEADERS)
            response.raise_for_status()

        return extract_paragraph_text(response.text)


class RenderedFetcher(ContentFetcher):
    """Loads the page in a fresh headless Chromium for every call."""

    name = "rendered"

    def __init__(self, timeout: float = 10.0, headless: bool = True):
        super().__init__(timeout)
        self.headless = headless

    async def _extract_text(self, url: str) -> str:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=self.headless)
            try:
                page = await browser.new_page()
                await page.goto(
                    url, wait_until="networkidle", timeout=self.timeout * 1000
                )
                return await page.evaluate(PARAGRAPH_SCRIPT)
            finally:
                await browser.close()


def extract_paragraph_text(html: str) -> str:
    """Join the text of every <p> element with single spaces."""
    soup = BeautifulSoup(html, "html.parser")
    return " ".join(p.get_text() for p in soup.find_all("p"))
