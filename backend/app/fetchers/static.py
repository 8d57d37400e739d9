from typing import Dict, List

from app.core.sources import brand_for_key
from .base import PageContent, PageFetcher


class StaticPageFetcher(PageFetcher):
    """
    Serves canned page text instead of hitting the network.

    Canned text may be registered under the page URL or its brand name.
    Requested URLs with no canned text are left out of the result.
    """

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.requests: List[List[str]] = []

    async def fetch_pages(self, urls: List[str]) -> Dict[str, PageContent]:
        self.requests.append(list(urls))
        result = {}
        for url in urls:
            text = self.pages.get(url, self.pages.get(brand_for_key(url)))
            if text is not None:
                result[url] = PageContent(url=url, text=text)
        return result
