from typing import Any
from pydantic import BaseModel


class SneakerSearchRequest(BaseModel):
    # Only its truthiness is checked; the content never drives matching
    query: Any = None


class SneakerRecord(BaseModel):
    name: str
    brand: str
    image: str  # placeholder, not a product photo
    performance: str
    support: str
    style: str
    link: str


class SneakerSearchResponse(BaseModel):
    sneakers: list[SneakerRecord]


class ErrorResponse(BaseModel):
    error: str
