from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from app.api.deps import get_catalog_store
from app.core.config import settings
from app.models.fashion import BudgetSummary, FashionItem, PinterestBoard, Recommendation, StyleProfile
from app.services.catalog import CatalogStore
from app.services.recommendation.engine import create_recommendation_engine, filter_by_budget
from app.services.recommendation.summary import summarize_budget

router = APIRouter(tags=["recommendations"])


class RecommendationRequest(BaseModel):
    board: PinterestBoard
    catalog: list[FashionItem] | None = Field(
        default=None, description="Items to rank; the loaded catalog is used when omitted"
    )
    limit: int | None = Field(default=None, ge=1, description="Maximum number of recommendations")
    max_budget: float | None = Field(default=None, ge=0, description="Drop items priced above this budget")


class RecommendationResponse(BaseModel):
    profile: StyleProfile
    recommendations: list[Recommendation]
    summary: BudgetSummary


@router.post("/recommendations", response_model=RecommendationResponse)
async def get_recommendations(
    payload: RecommendationRequest, store: CatalogStore = Depends(get_catalog_store)
) -> RecommendationResponse:
    limit = payload.limit or settings.DEFAULT_RECOMMENDATION_LIMIT
    if limit > settings.MAX_RECOMMENDATION_LIMIT:
        raise HTTPException(
            status_code=400,
            detail=f"limit must be at most {settings.MAX_RECOMMENDATION_LIMIT}",
        )

    catalog = payload.catalog if payload.catalog is not None else store.all_items()

    try:
        engine = create_recommendation_engine()
        profile = engine.analyze_pinterest_board(payload.board)
        recommendations = engine.generate_recommendations(catalog, limit)

        if payload.max_budget is not None:
            recommendations = filter_by_budget(recommendations, payload.max_budget)
            logger.info(f"Found {len(recommendations)} items within budget {payload.max_budget}")

        logger.info(f"Returning {len(recommendations)} recommendations for board {payload.board.id}")
        return RecommendationResponse(
            profile=profile,
            recommendations=recommendations,
            summary=summarize_budget(recommendations),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error generating recommendations for board {payload.board.id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
