from collections.abc import Sequence

from app.models.fashion import BudgetSummary, PriceDistribution, Recommendation
from app.services.recommendation.constants import PRICE_BUDGET_CEILING, PRICE_PREMIUM_FLOOR
from app.utils.items import calculate_average_price, group_by_category


def summarize_budget(recommendations: Sequence[Recommendation]) -> BudgetSummary:
    """
    Shopping budget summary for a list of recommendations.

    Unpriced items count as 0 toward the total and the distribution; the
    average only covers priced items.
    """
    items = [rec.item for rec in recommendations]
    distribution = PriceDistribution()

    for item in items:
        price = item.price or 0.0
        if price < PRICE_BUDGET_CEILING:
            distribution.budget += 1
        elif price < PRICE_PREMIUM_FLOOR:
            distribution.mid_range += 1
        else:
            distribution.premium += 1

    return BudgetSummary(
        total_items=len(items),
        total_cost=sum(item.price or 0.0 for item in items),
        average_price=calculate_average_price(items),
        price_distribution=distribution,
        by_category={
            category: [item.id for item in grouped] for category, grouped in group_by_category(items).items()
        },
    )
