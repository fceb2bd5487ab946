from typing import Final

# Top-N sizes kept in a style profile
TOP_COLORS: Final[int] = 5
TOP_STYLES: Final[int] = 8
TOP_CATEGORIES: Final[int] = 3
TOP_BRANDS: Final[int] = 5
