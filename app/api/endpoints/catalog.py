from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_catalog_store
from app.models.fashion import Category, FashionItem, PinterestBoard
from app.services.catalog import CatalogStore, load_sample_board

router = APIRouter(tags=["catalog"])


@router.get("/catalog")
async def list_catalog(
    category: Category | None = None,
    min_price: float | None = Query(default=None, ge=0),
    max_price: float | None = Query(default=None, ge=0),
    store: CatalogStore = Depends(get_catalog_store),
) -> dict[str, list[FashionItem]]:
    if min_price is not None and max_price is not None and min_price > max_price:
        raise HTTPException(status_code=400, detail="min_price must not exceed max_price")
    return {"items": store.list_items(category=category, min_price=min_price, max_price=max_price)}


@router.get("/catalog/{item_id}")
async def get_catalog_item(item_id: str, store: CatalogStore = Depends(get_catalog_store)) -> FashionItem:
    item = store.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Unknown catalog item '{item_id}'")
    return item


@router.get("/boards/sample", summary="Bundled demo board")
async def get_sample_board() -> PinterestBoard:
    return load_sample_board()
