"""
Page fetcher interface.

A fetcher takes a batch of URLs and returns the visible text of each page,
keyed by the requested URL.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Dict, Iterable, List, Optional

from bs4 import BeautifulSoup

STRIPPED_TAGS = ['script', 'style', 'noscript', 'template']


@dataclass
class PageContent:
    """Text content of one fetched page."""
    url: str
    text: str
    title: Optional[str] = None


def html_to_page(url: str, html: str) -> PageContent:
    """Reduce an HTML document to its visible text."""
    soup = BeautifulSoup(html, 'lxml')
    for tag in soup(STRIPPED_TAGS):
        tag.decompose()

    title_elem = soup.select_one('title')
    title = title_elem.get_text(strip=True) if title_elem else None

    return PageContent(
        url=url,
        text=soup.get_text(separator='\n', strip=True),
        title=title,
    )


class PageFetcher(ABC):
    """Base class for all page fetchers."""

    @abstractmethod
    async def fetch_pages(self, urls: List[str]) -> Dict[str, PageContent]:
        """Fetch every URL in one batch. Raises PageFetchError on failure."""
        pass


async def gather_pages(fetches: Iterable[Awaitable[PageContent]]) -> List[PageContent]:
    """
    Run page fetches concurrently and wait for every one to settle.

    The first failure is re-raised only once no fetch is still running, so
    none outlives the client or browser it was started with.
    """
    results = await asyncio.gather(*fetches, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results
