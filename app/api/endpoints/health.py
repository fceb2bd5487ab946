from fastapi import APIRouter, Depends

from app.api.deps import get_catalog_store
from app.services.catalog import CatalogStore

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness probe")
async def health_check(store: CatalogStore = Depends(get_catalog_store)) -> dict:
    return {"status": "ok", "catalog_items": len(store)}
