from fastapi import APIRouter
from pydantic import BaseModel

from app.models.fashion import PinterestBoard, WardrobeGap
from app.services.wardrobe import WardrobeGapFinder

router = APIRouter(prefix="/wardrobe", tags=["wardrobe"])


class WardrobeGapResponse(BaseModel):
    gaps: list[str]
    details: list[WardrobeGap]


@router.post("/gaps", response_model=WardrobeGapResponse)
async def find_wardrobe_gaps(board: PinterestBoard) -> WardrobeGapResponse:
    details = WardrobeGapFinder.describe_gaps(board)
    return WardrobeGapResponse(gaps=[gap.category for gap in details], details=details)
