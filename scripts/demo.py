"""Console walkthrough: analyze the sample board and shop the sample catalog."""

import argparse
import sys
from pathlib import Path

from loguru import logger

# Add project root to path to import the app package
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from app.models.fashion import PinterestBoard, Recommendation, StyleProfile  # noqa: E402
from app.services.catalog import catalog_store, load_sample_board  # noqa: E402
from app.services.recommendation.engine import (  # noqa: E402
    create_recommendation_engine,
    filter_by_budget,
    get_top_picks,
)
from app.services.recommendation.summary import summarize_budget  # noqa: E402
from app.services.wardrobe import WardrobeGapFinder  # noqa: E402
from app.utils.items import (  # noqa: E402
    calculate_average_price,
    deduplicate_items,
    format_price,
    group_by_category,
)

RULE = "═" * 60


def print_header(title: str):
    print(title)
    print(RULE)


def print_profile(profile: StyleProfile, board: PinterestBoard):
    print_header("YOUR STYLE PROFILE")
    sections = [
        ("Dominant Colors", profile.dominant_colors),
        ("Style Preferences", profile.style_keywords),
        ("Preferred Categories", profile.preferred_categories),
        ("Favorite Brands", profile.favored_brands),
    ]
    for title, values in sections:
        print(f"\n{title}:")
        for idx, value in enumerate(values, start=1):
            print(f"   {idx}. {value}")

    print("\nCategory Distribution:")
    for category, count, percentage in WardrobeGapFinder.category_distribution(board):
        print(f"   {category}: {count} items ({percentage:.0f}%)")

    average_price = calculate_average_price(board.pins)
    if average_price:
        print(f"\nAverage Price Point: {format_price(average_price)}")
    if profile.price_range:
        print(f"\nPrice Range: {format_price(profile.price_range.min)} - {format_price(profile.price_range.max)}")
    print()


def print_recommendations(recommendations: list[Recommendation]):
    print_header("PERSONALIZED RECOMMENDATIONS FOR YOU")
    for idx, rec in enumerate(recommendations, start=1):
        item = rec.item
        print(f"{idx}. {item.title}")
        print(f"   Brand: {item.brand or 'N/A'}")
        print(f"   Price: {format_price(item.price or 0)}")
        print(f"   Category: {item.category}")
        print(f"   Colors: {', '.join(item.colors)}")
        print(f"   Style: {', '.join(item.style)}")
        print(f"   Match Score: {rec.score * 100:.0f}%")
        if rec.reasons:
            print(f"   Why: {'; '.join(rec.reasons)}")
        print()


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=12, help="number of recommendations")
    parser.add_argument("--budget", type=float, default=150.0, help="budget for the budget-friendly list")
    parser.add_argument("--catalog", type=Path, default=None, help="JSON catalog file (defaults to the sample)")
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="INFO")

    catalog_store.load(args.catalog)
    catalog = deduplicate_items(catalog_store.all_items())
    board = load_sample_board()

    engine = create_recommendation_engine()
    print(f'Analyzing Pinterest board: "{board.name}" ({len(board.pins)} pins)\n')
    print_profile(engine.analyze_pinterest_board(board), board)

    print_header("WARDROBE GAP ANALYSIS")
    gaps = WardrobeGapFinder.describe_gaps(board)
    if not gaps:
        print("Your wardrobe looks well-balanced!\n")
    for idx, gap in enumerate(gaps, start=1):
        print(f"{idx}. {gap.category.upper()}")
        print(f"   Current items: {gap.current_count}")
        print(f"   Suggestion: Add {gap.suggested_count} more items")
        print(f"   Priority: {gap.priority}\n")

    recommendations = engine.generate_recommendations(catalog, args.limit)
    print_recommendations(recommendations)

    print_header("TOP 3 PICKS FOR YOU")
    for idx, rec in enumerate(get_top_picks(recommendations), start=1):
        print(f"{idx}. {rec.item.title} | {format_price(rec.item.price or 0)} | {rec.score * 100:.0f}% match")
    print()

    summary = summarize_budget(recommendations)
    print_header("SHOPPING BUDGET SUMMARY")
    print(f"   Total items: {summary.total_items}")
    print(f"   Total cost: {format_price(summary.total_cost)}")
    if summary.average_price is not None:
        print(f"   Average price: {format_price(summary.average_price)}")
    dist = summary.price_distribution
    print(f"   Budget (<$100): {dist.budget} items")
    print(f"   Mid-range ($100-$200): {dist.mid_range} items")
    print(f"   Premium ($200+): {dist.premium} items\n")

    print_header("RECOMMENDATIONS BY CATEGORY")
    for category, items in group_by_category(rec.item for rec in recommendations).items():
        print(f"\n{category.upper()} ({len(items)} items):")
        for idx, item in enumerate(items, start=1):
            print(f"   {idx}. {item.title} - {format_price(item.price or 0)}")
    print()

    affordable = filter_by_budget(recommendations, args.budget)
    print_header(f"BUDGET-FRIENDLY OPTIONS (Under {format_price(args.budget)})")
    for idx, rec in enumerate(affordable[:5], start=1):
        print(f"{idx}. {rec.item.title} - {format_price(rec.item.price or 0)}")
    print()


if __name__ == "__main__":
    try:
        main()
    except Exception:
        logger.exception("Demo failed")
        sys.exit(1)
