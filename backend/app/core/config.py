from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Kicks Finder API"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Page fetching
    PAGE_FETCHER: str = "http"  # 'http' or 'playwright'
    PAGE_FETCH_TIMEOUT: float = 30.0
    PAGE_FETCH_MAX_ATTEMPTS: int = 1
    USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # Quiz client
    API_BASE_URL: str = "http://localhost:8000"
    API_TIMEOUT: Optional[float] = 60.0

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
