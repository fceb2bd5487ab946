from fastapi import APIRouter
from loguru import logger

from app.models.fashion import PinterestBoard, StyleProfile
from app.services.recommendation.engine import create_recommendation_engine

router = APIRouter(tags=["profile"])


@router.post("/profile", summary="Build a style profile from a board")
async def build_profile(board: PinterestBoard) -> StyleProfile:
    engine = create_recommendation_engine()
    profile = engine.analyze_pinterest_board(board)
    if profile.is_empty:
        logger.warning(f"Board {board.id} has no pins, returning an empty style profile")
    return profile
