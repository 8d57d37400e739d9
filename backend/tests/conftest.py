"""
Shared fixtures for the sneaker search tests.
"""

import pytest

from app.core.sources import SOURCE_MAP
from app.fetchers import StaticPageFetcher
from app.services.sneaker_extractor import SneakerSearchService


NIKE_PAGE = (
    "Basketball shoes\n"
    "nike has great traction and support in every look\n"
    "Free delivery on orders over $50."
)

ADIDAS_PAGE = (
    "Men's basketball shoes\n"
    "Adidas Dame 9 is a lightweight guard shoe with a clean look."
)

WADE_PAGE = (
    "Way of Wade apparel\n"
    "wade: the official store for hoodies and socks, nothing else here"
)

WEARTESTERS_PAGE = (
    "Shoe reviews\n"
    "Our Nike GT Cut 3 review covers traction on dusty courts and more.\n"
    "Adidas AE 1 has support that holds up through four weeks of testing!"
)


@pytest.fixture
def sample_pages():
    """Canned page text for every source, keyed by URL."""
    return {
        SOURCE_MAP['Nike']: NIKE_PAGE,
        SOURCE_MAP['Adidas']: ADIDAS_PAGE,
        SOURCE_MAP['Way of Wade']: WADE_PAGE,
        SOURCE_MAP['WearTesters']: WEARTESTERS_PAGE,
    }


@pytest.fixture
def static_fetcher(sample_pages):
    return StaticPageFetcher(sample_pages)


@pytest.fixture
def search_service(static_fetcher):
    return SneakerSearchService(static_fetcher)
