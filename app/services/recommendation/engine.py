from collections.abc import Sequence

from loguru import logger

from app.core.constants import DEFAULT_RECOMMENDATION_LIMIT, DEFAULT_TOP_PICKS
from app.models.fashion import FashionItem, PinterestBoard, Recommendation, StyleProfile
from app.services.profile.builder import StyleProfileBuilder
from app.services.recommendation.reasons import generate_reasons
from app.services.recommendation.scoring import RecommendationScorer
from app.services.wardrobe import WardrobeGapFinder


class StyleProfileNotInitializedError(RuntimeError):
    """Raised when recommendations are requested before a board was analyzed."""

    def __init__(self):
        super().__init__("Style profile not initialized. Call analyze_pinterest_board first.")


class FashionRecommendationEngine:
    """
    Analyzes a Pinterest board and ranks catalog items against its style profile.

    Holds the last analyzed board and profile; each analysis replaces both.
    """

    def __init__(self, profile_builder: StyleProfileBuilder | None = None):
        self.profile_builder = profile_builder or StyleProfileBuilder()
        self.scorer = RecommendationScorer()
        self._board: PinterestBoard | None = None
        self._profile: StyleProfile | None = None

    def analyze_pinterest_board(self, board: PinterestBoard) -> StyleProfile:
        """
        Build and keep the style profile for a board.

        Args:
            board: Board containing the user's saved fashion items

        Returns:
            The freshly built StyleProfile
        """
        self._board = board
        self._profile = self.profile_builder.build_profile(board)
        logger.info(f"Analyzed board '{board.name}' ({len(board.pins)} pins)")
        return self._profile

    def generate_recommendations(
        self, catalog: Sequence[FashionItem], limit: int = DEFAULT_RECOMMENDATION_LIMIT
    ) -> list[Recommendation]:
        """
        Rank catalog items against the analyzed style profile.

        Args:
            catalog: Items to recommend from
            limit: Maximum number of recommendations to return

        Returns:
            Recommendations sorted by score descending; ties keep catalog order
        """
        if self._profile is None:
            raise StyleProfileNotInitializedError()
        if limit < 0:
            raise ValueError("limit must be non-negative")

        profile = self._profile
        scored = [
            Recommendation(
                item=item,
                score=self.scorer.score_item(item, profile),
                reasons=generate_reasons(item, profile),
            )
            for item in catalog
        ]
        scored.sort(key=lambda rec: rec.score, reverse=True)

        logger.debug(f"Scored {len(scored)} catalog items, returning top {min(limit, len(scored))}")
        return scored[:limit]

    def get_style_profile(self) -> StyleProfile | None:
        return self._profile

    def find_wardrobe_gaps(self) -> list[str]:
        """Under-represented categories on the analyzed board; empty before any analysis."""
        if self._board is None:
            return []
        return WardrobeGapFinder.find_gaps(self._board)


def create_recommendation_engine() -> FashionRecommendationEngine:
    return FashionRecommendationEngine()


def get_recommendations(
    board: PinterestBoard, catalog: Sequence[FashionItem], limit: int = DEFAULT_RECOMMENDATION_LIMIT
) -> list[Recommendation]:
    """One-shot helper: analyze the board, then rank the catalog."""
    engine = create_recommendation_engine()
    engine.analyze_pinterest_board(board)
    return engine.generate_recommendations(catalog, limit)


def filter_by_budget(recommendations: Sequence[Recommendation], max_budget: float) -> list[Recommendation]:
    """Keep recommendations priced at or under the budget. Unpriced items are dropped."""
    return [rec for rec in recommendations if rec.item.price is not None and rec.item.price <= max_budget]


def get_top_picks(recommendations: Sequence[Recommendation], count: int = DEFAULT_TOP_PICKS) -> list[Recommendation]:
    return list(recommendations[: max(count, 0)])
