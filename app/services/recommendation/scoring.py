from app.models.fashion import FashionItem, ScoreBreakdown, StyleProfile
from app.services.recommendation.constants import (
    MATCH_FULL,
    MATCH_NEUTRAL,
    WEIGHT_BRAND,
    WEIGHT_CATEGORY,
    WEIGHT_COLOR,
    WEIGHT_PRICE,
    WEIGHT_STYLE,
)
from app.utils.items import clamp
from app.utils.text import normalize_text


class RecommendationScorer:
    """
    Scores catalog items against a style profile with a fixed linear weighting.

    score = 0.30*color + 0.40*style + 0.15*category + 0.10*brand + 0.05*price

    Each component is a ratio in [0, 1] or one of {0.5, 1}; missing data scores
    neutral (0.5) instead of zero.
    """

    @staticmethod
    def score_item(item: FashionItem, profile: StyleProfile) -> float:
        """
        Score an item against the profile.

        Args:
            item: Catalog item to score
            profile: StyleProfile to score against

        Returns:
            Score in [0, 1] (higher = better match)
        """
        return RecommendationScorer.score_breakdown(item, profile).total

    @staticmethod
    def score_breakdown(item: FashionItem, profile: StyleProfile) -> ScoreBreakdown:
        color = RecommendationScorer.tag_match(item.colors, profile.dominant_colors)
        style = RecommendationScorer.tag_match(item.style, profile.style_keywords)
        category = MATCH_FULL if RecommendationScorer.category_matches(item, profile) else MATCH_NEUTRAL
        brand = MATCH_FULL if RecommendationScorer.brand_matches(item, profile) else MATCH_NEUTRAL
        # No (or zero) price on either side -> neutral, i.e. a flat 0.025 contribution
        price = MATCH_FULL if RecommendationScorer.price_matches(item, profile) else MATCH_NEUTRAL

        total = (
            color * WEIGHT_COLOR
            + style * WEIGHT_STYLE
            + category * WEIGHT_CATEGORY
            + brand * WEIGHT_BRAND
            + price * WEIGHT_PRICE
        )
        return ScoreBreakdown(
            color=color,
            style=style,
            category=category,
            brand=brand,
            price=price,
            total=clamp(total, 0.0, 1.0),
        )

    @staticmethod
    def tag_match(item_tags: list[str], profile_tags: list[str]) -> float:
        """Share of the item's tags found in the profile's top-N; 0.5 if either side is empty."""
        if not item_tags or not profile_tags:
            return MATCH_NEUTRAL
        wanted = set(profile_tags)
        matches = sum(1 for tag in item_tags if normalize_text(tag) in wanted)
        return matches / max(len(item_tags), 1)

    @staticmethod
    def matching_tags(item_tags: list[str], profile_tags: list[str]) -> list[str]:
        wanted = set(profile_tags)
        return [tag for tag in item_tags if normalize_text(tag) in wanted]

    @staticmethod
    def category_matches(item: FashionItem, profile: StyleProfile) -> bool:
        return normalize_text(item.category) in profile.preferred_categories

    @staticmethod
    def brand_matches(item: FashionItem, profile: StyleProfile) -> bool:
        if not item.brand:
            return False
        return normalize_text(item.brand) in profile.favored_brands

    @staticmethod
    def price_matches(item: FashionItem, profile: StyleProfile) -> bool:
        if not item.price or profile.price_range is None:
            return False
        return profile.price_range.contains(item.price)
