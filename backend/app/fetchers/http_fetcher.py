import logging
from typing import Dict, List, Optional

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from app.core.exceptions import PageFetchError
from .base import PageContent, PageFetcher, gather_pages, html_to_page

logger = logging.getLogger(__name__)

# Transport failures worth another attempt; HTTP error statuses never are
TRANSIENT_ERRORS = (
    httpx.TimeoutException,
    httpx.NetworkError,
)


class HttpPageFetcher(PageFetcher):
    """Fetches pages concurrently over plain HTTP."""

    def __init__(
        self,
        user_agent: str,
        timeout: float = 30.0,
        max_attempts: int = 1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_attempts = max(max_attempts, 1)
        self.transport = transport

        self._get_with_retry = retry(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )(self._get)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={'User-Agent': self.user_agent},
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        response = await client.get(url)
        response.raise_for_status()
        return response

    async def _fetch_one(self, client: httpx.AsyncClient, url: str) -> PageContent:
        try:
            response = await self._get_with_retry(client, url)
        except httpx.HTTPStatusError as e:
            raise PageFetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise PageFetchError(url, str(e) or type(e).__name__) from e

        logger.debug(f"Fetched {url} ({len(response.text)} bytes)")
        return html_to_page(url, response.text)

    async def fetch_pages(self, urls: List[str]) -> Dict[str, PageContent]:
        async with self._client() as client:
            pages = await gather_pages(self._fetch_one(client, url) for url in urls)

        return {page.url: page for page in pages}
