"""Plain-text rendering of the quiz screens."""

from typing import Iterable, List, Sequence, Tuple

from app.core.sources import ALL_BRANDS, BRAND_FILTERS
from app.schemas.sneaker import SneakerRecord

LOADING_MESSAGE = "Searching WearTesters, Nike, Adidas, Way of Wade..."


def render_preferences(pairs: Iterable[Tuple[str, str]]) -> str:
    lines = ["Your Sneaker Preferences"]
    lines.extend(f"  {question} {answer}" for question, answer in pairs)
    return "\n".join(lines)


def render_brand_filters(selected: str = ALL_BRANDS, brands: Sequence[str] = BRAND_FILTERS) -> str:
    return "  ".join(f"[{brand}]" if brand == selected else brand for brand in brands)


def render_card(sneaker: SneakerRecord) -> str:
    return "\n".join([
        sneaker.name,
        f"  Image: {sneaker.image}",
        f"  Brand: {sneaker.brand}",
        f"  Performance: {sneaker.performance}",
        f"  Support: {sneaker.support}",
        f"  Style: {sneaker.style}",
        f"  View Review or Buy: {sneaker.link}",
    ])


def render_results(sneakers: List[SneakerRecord]) -> str:
    if not sneakers:
        return "No sneakers found."
    return "\n\n".join(render_card(s) for s in sneakers)
