from app.core.config import Settings
from app.fetchers.base import PageContent, PageFetcher, gather_pages, html_to_page
from app.fetchers.http_fetcher import HttpPageFetcher
from app.fetchers.static import StaticPageFetcher


def get_page_fetcher(settings: Settings) -> PageFetcher:
    """Factory function to get the configured page fetcher."""
    name = settings.PAGE_FETCHER.lower()

    if name == 'http':
        return HttpPageFetcher(
            user_agent=settings.USER_AGENT,
            timeout=settings.PAGE_FETCH_TIMEOUT,
            max_attempts=settings.PAGE_FETCH_MAX_ATTEMPTS,
        )

    if name == 'playwright':
        # Lazy import so the browser stack is only needed when selected
        from app.fetchers.browser import PlaywrightPageFetcher
        return PlaywrightPageFetcher(
            user_agent=settings.USER_AGENT,
            timeout=settings.PAGE_FETCH_TIMEOUT,
        )

    raise ValueError(f"Unknown page fetcher: {settings.PAGE_FETCHER}")


__all__ = [
    "PageContent",
    "PageFetcher",
    "html_to_page",
    "gather_pages",
    "HttpPageFetcher",
    "StaticPageFetcher",
    "get_page_fetcher",
]
