#!/usr/bin/env python
"""
Terminal version of the sneaker quiz.

Usage:
    python scripts/kicks_finder.py
    python scripts/kicks_finder.py --api-url http://localhost:8000
    python scripts/kicks_finder.py --offline --brand Nike
"""

import asyncio
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import settings
from app.core.sources import BRAND_FILTERS, ALL_BRANDS
from app.fetchers import StaticPageFetcher
from app.quiz import QuizController, QuizPhase, SneakerSearchClient
from app.quiz.questions import ANSWER_PLACEHOLDER
from app.quiz.render import (
    LOADING_MESSAGE,
    render_brand_filters,
    render_preferences,
    render_results,
)
from app.services.sneaker_extractor import SneakerSearchService

logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')


# Canned page text for --offline runs
SAMPLE_PAGES = {
    'Nike': (
        "Basketball Shoes\n"
        "Nike LeBron 21 with zoom turbo cushioning and a look built for the playoffs.\n"
        "Nike Sabrina 2 delivers herringbone traction for quick guards."
    ),
    'Adidas': (
        "Men's basketball shoes\n"
        "Adidas Dame 9 brings lightweight support for shifty scorers."
    ),
    'Way of Wade': (
        "Shop shoes\n"
        "Wade 808 4 Ultra Low with a bold look and boom cushioning."
    ),
    'WearTesters': (
        "Basketball shoe performance reviews\n"
        "Nike GT Cut 3 performance review: traction is elite on clean courts.\n"
        "Adidas Harden Vol 8 keeps the support high and the look loud."
    ),
}


async def run_quiz(controller: QuizController) -> None:
    """Prompt for every question, then submit the search."""
    total = len(controller.questions)
    while controller.phase == QuizPhase.ANSWERING:
        step = controller.state.current_step
        answer = input(f"[{step + 1}/{total}] {controller.current_question}\n  {ANSWER_PLACEHOLDER} ")
        if controller.is_last_step:
            print(f"\n{LOADING_MESSAGE}\n")
        await controller.advance(answer)


def choose_brand(controller: QuizController) -> bool:
    """Ask for a brand filter. Returns False when the user is done."""
    choice = input(f"\nFilter by brand ({', '.join(BRAND_FILTERS)}), blank to quit: ").strip()
    if not choice:
        return False
    if choice not in BRAND_FILTERS:
        print(f"Unknown brand: {choice}")
        return True

    controller.select_brand(choice)
    return True


def show_results(controller: QuizController) -> None:
    print(render_brand_filters(controller.state.selected_brand))
    print()
    print(render_results(controller.visible_results))


def main():
    parser = argparse.ArgumentParser(description="Find sneakers that match your preferences")
    parser.add_argument('--api-url', default=settings.API_BASE_URL, help='Sneaker search API base URL')
    parser.add_argument('--brand', default=ALL_BRANDS, choices=BRAND_FILTERS, help='Initial brand filter')
    parser.add_argument('--offline', action='store_true', help='Search canned pages in-process')

    args = parser.parse_args()

    if args.offline:
        search_client = SneakerSearchService(StaticPageFetcher(SAMPLE_PAGES))
    else:
        search_client = SneakerSearchClient(base_url=args.api_url)

    controller = QuizController(search_client)

    try:
        asyncio.run(run_quiz(controller))
    except (EOFError, KeyboardInterrupt):
        print("\nQuiz cancelled")
        return 1

    controller.select_brand(args.brand)

    print(render_preferences(controller.preferences()))
    print()
    show_results(controller)

    try:
        while choose_brand(controller):
            show_results(controller)
    except (EOFError, KeyboardInterrupt):
        pass

    return 0


if __name__ == '__main__':
    sys.exit(main())
