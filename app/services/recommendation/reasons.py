from app.models.fashion import FashionItem, StyleProfile
from app.services.recommendation.scoring import RecommendationScorer


def generate_reasons(item: FashionItem, profile: StyleProfile) -> list[str]:
    """
    Human-readable explanations for a recommendation.

    Re-runs the scorer's match checks; only matches produce a reason.
    Purely presentational, never fed back into the score.
    """
    reasons: list[str] = []

    matching_colors = RecommendationScorer.matching_tags(item.colors, profile.dominant_colors)
    if matching_colors:
        reasons.append(f"Matches your preferred colors: {', '.join(matching_colors)}")

    matching_styles = RecommendationScorer.matching_tags(item.style, profile.style_keywords)
    if matching_styles:
        reasons.append(f"Fits your {', '.join(matching_styles)} style")

    if RecommendationScorer.category_matches(item, profile):
        reasons.append(f"You often save {item.category}")

    if RecommendationScorer.brand_matches(item, profile):
        reasons.append(f"From your favorite brand: {item.brand}")

    if RecommendationScorer.price_matches(item, profile):
        reasons.append("Within your typical price range")

    return reasons
