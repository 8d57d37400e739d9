import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import Settings, settings as default_settings
from app.api.routes import api_router
from app.core.sources import SOURCE_MAP

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the sneaker search API for the given settings."""
    settings = settings or default_settings

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    app = FastAPI(
        title=settings.APP_NAME,
        version=VERSION,
        debug=settings.DEBUG,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Only the quiz front end calls the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @app.get("/")
    async def root():
        return {
            "name": settings.APP_NAME,
            "version": VERSION,
            "environment": settings.ENVIRONMENT,
            "page_fetcher": settings.PAGE_FETCHER,
            "sources": list(SOURCE_MAP),
            "docs": "/api/docs",
        }

    return app


app = create_app()
