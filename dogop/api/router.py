from fastapi import APIRouter

from dogop.api.routers import health, offers, quotes

api_router = APIRouter()

api_router.include_router(quotes.router)
api_router.include_router(offers.router)
api_router.include_router(health.router)
