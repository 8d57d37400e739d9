"""
Fixed brand -> source page configuration.

The same mapping builds the fetch batch and supplies each record's outbound link.
"""

from typing import List

SOURCE_MAP = {
    'Nike': 'https://www.nike.com/w?q=basketball+shoes&vst=basketball',
    'Adidas': 'https://www.adidas.com/us/men-basketball-shoes',
    'Way of Wade': 'https://wayofwade.com/collections/shoes',
    'WearTesters': 'https://weartesters.com/category/performance-reviews/basketball-shoes-reviews/',
}

ALL_BRANDS = 'All'
BRAND_FILTERS = [ALL_BRANDS, *SOURCE_MAP]

FALLBACK_LINK = '#'


def source_urls() -> List[str]:
    """Get the URLs to fetch, in source order."""
    return list(SOURCE_MAP.values())


def brand_for_key(key: str) -> str:
    """Resolve a fetch result key (URL or brand name) to a brand name."""
    if key in SOURCE_MAP:
        return key
    for brand, url in SOURCE_MAP.items():
        if url == key:
            return brand
    return key


def link_for_brand(brand: str) -> str:
    return SOURCE_MAP.get(brand, FALLBACK_LINK)
