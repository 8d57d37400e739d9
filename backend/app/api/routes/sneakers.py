import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.exceptions import MissingQueryError
from app.core.sources import BRAND_FILTERS
from app.fetchers import get_page_fetcher
from app.schemas.sneaker import ErrorResponse, SneakerSearchRequest, SneakerSearchResponse
from app.services.sneaker_extractor import SneakerSearchService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_search_service() -> SneakerSearchService:
    return SneakerSearchService(get_page_fetcher(settings))


@router.post(
    "/search-sneakers",
    response_model=SneakerSearchResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def search_sneakers(
    body: Any = Body(None, examples=[{"query": "What sport do you play (if any): basketball"}]),
    service: SneakerSearchService = Depends(get_search_service),
):
    """Fetch the configured sources and extract sneaker records."""
    # Anything but a JSON object carries no query
    query = SneakerSearchRequest.model_validate(body).query if isinstance(body, dict) else None

    try:
        sneakers = await service.search(query)
    except MissingQueryError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )
    except Exception:
        logger.exception("Sneaker search failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch sneaker data"},
        )

    return SneakerSearchResponse(sneakers=sneakers)


@router.get("/brands")
async def list_brands():
    """List the brand filters, 'All' first."""
    return BRAND_FILTERS
