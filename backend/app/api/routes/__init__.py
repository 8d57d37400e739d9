from fastapi import APIRouter
from app.api.routes import sneakers

api_router = APIRouter()

api_router.include_router(sneakers.router, tags=["sneakers"])
