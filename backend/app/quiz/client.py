import logging
from typing import List, Optional

import httpx

from app.core.config import settings
from app.schemas.sneaker import SneakerRecord

logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/search-sneakers"


class SneakerSearchClient:
    """Posts quiz queries to the sneaker search endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.transport = transport

    async def search(self, query: str) -> List[SneakerRecord]:
        """
        Submit a query and return the sneakers in the response.

        Error responses carry no sneakers and yield an empty list. Transport
        and decoding failures raise.
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                f"{self.base_url}{SEARCH_PATH}",
                json={"query": query},
            )

        data = response.json()
        if response.is_error:
            logger.warning(f"Search returned {response.status_code}: {data.get('error')}")

        return [SneakerRecord.model_validate(s) for s in data.get("sneakers") or []]
