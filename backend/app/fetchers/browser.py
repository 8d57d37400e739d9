"""
Browser-rendered page fetching using Playwright.

Use this for sources that require JavaScript rendering or block plain HTTP clients.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Dict, List

from playwright.async_api import async_playwright, Error as PlaywrightError

from app.core.exceptions import PageFetchError
from .base import PageContent, PageFetcher, gather_pages, html_to_page

logger = logging.getLogger(__name__)


class PlaywrightPageFetcher(PageFetcher):
    """Fetches pages through headless Chromium, one context per batch."""

    def __init__(self, user_agent: str, timeout: float = 30.0, settle_seconds: float = 2.0):
        self.user_agent = user_agent
        self.timeout_ms = int(timeout * 1000)
        self.settle_seconds = settle_seconds

    @asynccontextmanager
    async def get_browser(self):
        """Context manager for browser lifecycle."""
        playwright = await async_playwright().start()
        browser = await playwright.chromium.launch(
            headless=True,
            args=[
                '--disable-blink-features=AutomationControlled',
                '--disable-dev-shm-usage',
                '--no-sandbox',
            ]
        )

        context = await browser.new_context(
            viewport={'width': 1920, 'height': 1080},
            user_agent=self.user_agent,
            locale='en-US',
        )

        try:
            yield context
        finally:
            await context.close()
            await browser.close()
            await playwright.stop()

    async def _fetch_one(self, context, url: str) -> PageContent:
        page = await context.new_page()

        try:
            await page.goto(url, wait_until='networkidle', timeout=self.timeout_ms)

            # Give dynamic content time to load
            await asyncio.sleep(self.settle_seconds)

            return html_to_page(url, await page.content())

        except PlaywrightError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise PageFetchError(url, str(e)) from e

        finally:
            await page.close()

    async def fetch_pages(self, urls: List[str]) -> Dict[str, PageContent]:
        async with self.get_browser() as context:
            pages = await gather_pages(self._fetch_one(context, url) for url in urls)

        return {page.url: page for page in pages}
