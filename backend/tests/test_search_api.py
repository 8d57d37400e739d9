"""
Tests for the sneaker search HTTP endpoint.
"""

import pytest
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from main import app, create_app
from app.core.config import Settings
from app.api.routes.sneakers import get_search_service
from app.core.exceptions import PageFetchError
from app.core.sources import BRAND_FILTERS, SOURCE_MAP
from app.fetchers import StaticPageFetcher
from app.services.sneaker_extractor import SneakerSearchService


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_fetcher(fetcher):
    app.dependency_overrides[get_search_service] = lambda: SneakerSearchService(fetcher)


class TestSearchSneakers:
    """Tests for POST /api/search-sneakers."""

    def test_returns_sneakers(self, client, static_fetcher):
        use_fetcher(static_fetcher)

        response = client.post("/api/search-sneakers", json={"query": "Do you have flat feet or high arches: flat"})

        assert response.status_code == 200
        sneakers = response.json()["sneakers"]
        assert len(sneakers) == 4
        assert sneakers[0] == {
            "name": "nike has great traction and support in every look",
            "brand": "Nike",
            "image": "https://via.placeholder.com/400x300.png?text=Nike",
            "performance": "Good traction",
            "support": "Great support",
            "style": "Stylish",
            "link": SOURCE_MAP["Nike"],
        }

    def test_empty_results(self, client):
        use_fetcher(StaticPageFetcher({"Nike": "nothing to see here"}))

        response = client.post("/api/search-sneakers", json={"query": "q"})

        assert response.status_code == 200
        assert response.json() == {"sneakers": []}

    @pytest.mark.parametrize("body", [
        {"query": ""},
        {"query": None},
        {"query": 0},
        {"query": False},
        {},
        "just a string",
        [],
    ])
    def test_missing_query(self, client, static_fetcher, body):
        use_fetcher(static_fetcher)

        response = client.post("/api/search-sneakers", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing query"}
        assert static_fetcher.requests == []

    def test_missing_body(self, client, static_fetcher):
        use_fetcher(static_fetcher)

        response = client.post("/api/search-sneakers")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing query"}

    def test_truthy_non_string_query(self, client, static_fetcher):
        use_fetcher(static_fetcher)

        response = client.post("/api/search-sneakers", json={"query": 42})

        assert response.status_code == 200
        assert len(response.json()["sneakers"]) == 4

    def test_fetcher_failure(self, client):
        fetcher = AsyncMock()
        fetcher.fetch_pages.side_effect = PageFetchError(SOURCE_MAP["Nike"], "HTTP 503")
        use_fetcher(fetcher)

        response = client.post("/api/search-sneakers", json={"query": "q"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch sneaker data"}
        assert "sneakers" not in response.json()

    def test_unexpected_fetcher_error(self, client):
        fetcher = AsyncMock()
        fetcher.fetch_pages.side_effect = RuntimeError("plugin crashed")
        use_fetcher(fetcher)

        response = client.post("/api/search-sneakers", json={"query": "q"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch sneaker data"}

    def test_malformed_page(self, client):
        fetcher = AsyncMock()
        fetcher.fetch_pages.return_value = {SOURCE_MAP["Nike"]: {"html": "<p>shoe</p>"}}
        use_fetcher(fetcher)

        response = client.post("/api/search-sneakers", json={"query": "q"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch sneaker data"}

    def test_repeated_calls_match(self, client, static_fetcher):
        use_fetcher(static_fetcher)

        first = client.post("/api/search-sneakers", json={"query": "q"}).json()
        second = client.post("/api/search-sneakers", json={"query": "q"}).json()

        assert first == second


class TestMiscRoutes:
    """Tests for the supporting routes."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_root(self, client):
        data = client.get("/").json()
        assert data["docs"] == "/api/docs"

    def test_root_reflects_settings(self):
        custom = create_app(Settings(APP_NAME="Kicks Staging", ENVIRONMENT="staging", PAGE_FETCHER="playwright"))

        data = TestClient(custom).get("/").json()

        assert data["name"] == "Kicks Staging"
        assert data["environment"] == "staging"
        assert data["page_fetcher"] == "playwright"
        assert data["sources"] == list(SOURCE_MAP)

    def test_cors_allows_configured_origin(self):
        custom = create_app(Settings(CORS_ORIGINS=["http://quiz.test"]))

        response = TestClient(custom).options(
            "/api/search-sneakers",
            headers={"Origin": "http://quiz.test", "Access-Control-Request-Method": "POST"},
        )

        assert response.headers["access-control-allow-origin"] == "http://quiz.test"

    def test_brands(self, client):
        assert client.get("/api/brands").json() == BRAND_FILTERS
