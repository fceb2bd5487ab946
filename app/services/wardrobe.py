import math

from loguru import logger

from app.core.constants import ALL_CATEGORIES
from app.models.fashion import PinterestBoard, WardrobeGap
from app.utils.items import calculate_percentage, group_by_category

# A category is a gap when its count is below this share of the mean
GAP_THRESHOLD_RATIO = 0.5


class WardrobeGapFinder:
    """Flags categories that are under-represented on a board."""

    @staticmethod
    def category_counts(board: PinterestBoard) -> dict[str, int]:
        grouped = group_by_category(board.pins)
        return {category: len(grouped.get(category, [])) for category in ALL_CATEGORIES}

    @staticmethod
    def find_gaps(board: PinterestBoard) -> list[str]:
        """
        Categories whose pin count is below half the mean count.

        The mean is taken over all six categories, including empty ones.
        Results follow the fixed category order.
        """
        counts = WardrobeGapFinder.category_counts(board)
        mean = sum(counts.values()) / len(ALL_CATEGORIES)
        gaps = [category for category in ALL_CATEGORIES if counts[category] < mean * GAP_THRESHOLD_RATIO]
        logger.debug(f"Board {board.id}: category counts {counts}, mean {mean:.2f}, gaps {gaps}")
        return gaps

    @staticmethod
    def describe_gaps(board: PinterestBoard) -> list[WardrobeGap]:
        """Gap categories with their current count and how many items would close the gap."""
        counts = WardrobeGapFinder.category_counts(board)
        target = math.ceil(sum(counts.values()) / len(ALL_CATEGORIES))

        details = []
        for category in WardrobeGapFinder.find_gaps(board):
            current = counts[category]
            details.append(
                WardrobeGap(
                    category=category,
                    current_count=current,
                    suggested_count=max(target - current, 1),
                    priority="high" if current == 0 else "medium",
                )
            )
        return details

    @staticmethod
    def category_distribution(board: PinterestBoard) -> list[tuple[str, int, float]]:
        """
        Categories present on the board as (category, count, percentage of pins).

        Sorted by count descending; ties keep the fixed category order.
        """
        counts = WardrobeGapFinder.category_counts(board)
        total = len(board.pins)
        present = [(category, count) for category, count in counts.items() if count > 0]
        present.sort(key=lambda x: x[1], reverse=True)
        return [(category, count, calculate_percentage(count, total)) for category, count in present]
