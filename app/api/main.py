from fastapi import APIRouter

from app.core.config import settings

from .endpoints.catalog import router as catalog_router
from .endpoints.health import router as health_router
from .endpoints.profile import router as profile_router
from .endpoints.recommendations import router as recommendations_router
from .endpoints.wardrobe import router as wardrobe_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API is running"}


api_router.include_router(health_router)
api_router.include_router(catalog_router)
api_router.include_router(profile_router)
api_router.include_router(recommendations_router)
api_router.include_router(wardrobe_router)
