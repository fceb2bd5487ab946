"""
Core constants used across the application. Keep these simple and documented.
"""

from typing import Final

from app.models.fashion import Category

# Fixed category set, in the order gap reports list them
ALL_CATEGORIES: Final[tuple[Category, ...]] = ("tops", "bottoms", "dresses", "outerwear", "shoes", "accessories")

DEFAULT_RECOMMENDATION_LIMIT: Final[int] = 10
DEFAULT_TOP_PICKS: Final[int] = 3
