import uuid
from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from app.models.fashion import FashionItem
from app.utils.text import calculate_similarity, normalize_text

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}


def group_by_category(items: Iterable[FashionItem]) -> dict[str, list[FashionItem]]:
    """Group items by category, keeping first-seen category order."""
    return group_by(items, "category")


def group_by(items: Iterable[Any], attr: str) -> dict[str, list[Any]]:
    grouped: dict[str, list[Any]] = defaultdict(list)
    for item in items:
        grouped[str(getattr(item, attr))].append(item)
    return dict(grouped)


def calculate_average_price(items: Iterable[FashionItem]) -> float | None:
    """Average over priced items only. None when nothing has a price."""
    prices = [item.price for item in items if item.price is not None]
    if not prices:
        return None
    return sum(prices) / len(prices)


def filter_by_price_range(items: Iterable[FashionItem], min_price: float, max_price: float) -> list[FashionItem]:
    """Keep items priced within [min_price, max_price]. Unpriced items are dropped."""
    return [item for item in items if item.price is not None and min_price <= item.price <= max_price]


def filter_by_categories(items: Iterable[FashionItem], categories: Iterable[str]) -> list[FashionItem]:
    wanted = {normalize_text(c) for c in categories}
    return [item for item in items if normalize_text(item.category) in wanted]


def deduplicate_items(items: Iterable[FashionItem], threshold: float = 0.8) -> list[FashionItem]:
    """
    Drop near-duplicate items.

    Two items are duplicates when the mean of their title and description
    similarity is strictly above ``threshold``. The first occurrence wins.

    Args:
        items: Items to deduplicate
        threshold: Similarity threshold (0-1)

    Returns:
        Items with near-duplicates removed, original order preserved
    """
    unique: list[FashionItem] = []
    for item in items:
        is_duplicate = any(
            (calculate_similarity(item.title, kept.title) + calculate_similarity(item.description, kept.description))
            / 2
            > threshold
            for kept in unique
        )
        if not is_duplicate:
            unique.append(item)
    return unique


def generate_id(prefix: str = "item") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def format_price(price: float, currency: str = "USD") -> str:
    """Format a price for display, e.g. ``$1,250.00``."""
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is None:
        return f"{price:,.2f} {currency.upper()}"
    sign = "-" if price < 0 else ""
    return f"{sign}{symbol}{abs(price):,.2f}"


def calculate_percentage(value: float, total: float) -> float:
    if total == 0:
        return 0.0
    return (value / total) * 100


def clamp(value: float, min_value: float, max_value: float) -> float:
    return min(max(value, min_value), max_value)
