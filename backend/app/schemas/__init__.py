from app.schemas.sneaker import (
    SneakerSearchRequest, SneakerRecord, SneakerSearchResponse, ErrorResponse
)

__all__ = [
    "SneakerSearchRequest", "SneakerRecord", "SneakerSearchResponse", "ErrorResponse",
]
