import pytest

from app.models.fashion import Recommendation
from app.services.recommendation.summary import summarize_budget
from tests.factories import make_item


def _rec(item_id: str, **overrides) -> Recommendation:
    return Recommendation(item=make_item(item_id, **overrides), score=0.5)


def test_budget_summary_buckets_and_totals():
    recommendations = [
        _rec("a", price=50, category="tops"),
        _rec("b", price=150, category="shoes"),
        _rec("c", price=200, category="tops"),
        _rec("d", category="accessories"),
    ]

    summary = summarize_budget(recommendations)

    assert summary.total_items == 4
    assert summary.total_cost == pytest.approx(400)
    assert summary.average_price == pytest.approx(400 / 3)
    assert summary.price_distribution.budget == 2  # "d" has no price and counts as 0
    assert summary.price_distribution.mid_range == 1
    assert summary.price_distribution.premium == 1
    assert summary.by_category == {"tops": ["a", "c"], "shoes": ["b"], "accessories": ["d"]}


def test_empty_summary():
    summary = summarize_budget([])

    assert summary.total_items == 0
    assert summary.total_cost == 0
    assert summary.average_price is None
    assert summary.by_category == {}
