from typing import Final

# Feature weights (sum to 1.0)
WEIGHT_COLOR: Final[float] = 0.30
WEIGHT_STYLE: Final[float] = 0.40
WEIGHT_CATEGORY: Final[float] = 0.15
WEIGHT_BRAND: Final[float] = 0.10
WEIGHT_PRICE: Final[float] = 0.05

MATCH_FULL: Final[float] = 1.0
MATCH_NEUTRAL: Final[float] = 0.5  # Missing data or a miss, never zero

# Price buckets used by the budget summary
PRICE_BUDGET_CEILING: Final[float] = 100.0
PRICE_PREMIUM_FLOOR: Final[float] = 200.0
