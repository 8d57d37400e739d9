"""
Sneaker extraction from fetched retailer and review pages.

Scans page text for brand keywords and turns every matched text window into
a display record. Extraction is best-effort: pages may yield no records,
duplicates, or names that fall back to a placeholder.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, List

from app.core.exceptions import MalformedPageError, MissingQueryError
from app.core.sources import brand_for_key, link_for_brand, source_urls
from app.fetchers.base import PageContent, PageFetcher
from app.schemas.sneaker import SneakerRecord

logger = logging.getLogger(__name__)

# Brand keyword followed by 20-200 characters up to the end of a sentence or line
SNIPPET_PATTERN = re.compile(r'(nike|adidas|wade)[^.!?\n]{20,200}', re.IGNORECASE)

# Brand keyword run up to the first newline or colon. Narrower than
# SNIPPET_PATTERN, so a snippet like "nike: ..." gets the fallback name.
NAME_PATTERN = re.compile(r'(nike|adidas|wade)[^\n:]+')

SHOE_KEYWORD = 'shoe'
FALLBACK_NAME = 'Sneaker'
PLACEHOLDER_IMAGE_URL = 'https://via.placeholder.com/400x300.png?text={text}'

# (keyword, label when present, label when absent)
PERFORMANCE_LABELS = ('traction', 'Good traction', 'Standard')
SUPPORT_LABELS = ('support', 'Great support', 'Moderate')
STYLE_LABELS = ('look', 'Stylish', 'Basic')


def find_snippets(text: str) -> List[str]:
    """Find every brand snippet in the page text, in order."""
    return [match.group(0) for match in SNIPPET_PATTERN.finditer(text.lower())]


def extract_name(snippet: str) -> str:
    match = NAME_PATTERN.search(snippet)
    return match.group(0) if match else FALLBACK_NAME


def placeholder_image(brand: str) -> str:
    return PLACEHOLDER_IMAGE_URL.format(text=brand.replace(' ', '+'))


def _label(snippet: str, labels: tuple) -> str:
    keyword, present, absent = labels
    return present if keyword in snippet else absent


def build_record(snippet: str, brand: str) -> SneakerRecord:
    """Synthesize one display record from a snippet."""
    return SneakerRecord(
        name=extract_name(snippet),
        brand=brand,
        image=placeholder_image(brand),
        performance=_label(snippet, PERFORMANCE_LABELS),
        support=_label(snippet, SUPPORT_LABELS),
        style=_label(snippet, STYLE_LABELS),
        link=link_for_brand(brand),
    )


def _page_text(key: str, content) -> str:
    text = getattr(content, 'text', None)
    if text is None and isinstance(content, Mapping):
        text = content.get('text')
    if not isinstance(text, str):
        raise MalformedPageError(key)
    return text


def extract_sneakers(pages: Mapping[str, PageContent]) -> List[SneakerRecord]:
    """
    Build records for every snippet across all fetched pages.

    Args:
        pages: Fetch result keyed by source URL (or brand name)

    Returns:
        Records in page order then match order; unsorted and not deduplicated
    """
    sneakers = []

    for key, content in pages.items():
        brand = brand_for_key(key)
        text = _page_text(key, content).lower()

        if SHOE_KEYWORD not in text:
            logger.debug(f"Skipping {brand}: no shoe content")
            continue

        snippets = find_snippets(text)
        logger.debug(f"{brand}: {len(snippets)} snippets")

        for snippet in snippets:
            sneakers.append(build_record(snippet, brand))

    return sneakers


class SneakerSearchService:
    """Fetches the configured sources and extracts sneaker records."""

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    async def search(self, query: Any) -> List[SneakerRecord]:
        if not query:
            raise MissingQueryError()

        # The query is validated but does not influence matching
        logger.debug(f"Sneaker search query: {query}")

        urls = source_urls()
        pages = await self.fetcher.fetch_pages(urls)
        sneakers = extract_sneakers(pages)

        logger.info(f"Extracted {len(sneakers)} sneakers from {len(pages)} of {len(urls)} sources")
        return sneakers
