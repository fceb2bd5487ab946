from collections import Counter
from collections.abc import Iterable

from loguru import logger

from app.models.fashion import PinterestBoard, PriceRange, StyleProfile
from app.services.profile.constants import TOP_BRANDS, TOP_CATEGORIES, TOP_COLORS, TOP_STYLES
from app.utils.text import normalize_text


class StyleProfileBuilder:
    """
    Builds a style profile from a board using plain frequency counts.

    Design principles:
    - Every pin counts once per tag, no weighting
    - Keys are normalized text, so "Black " and "black" are the same color
    - Ties keep first-seen order
    - Empty input is valid and yields an empty profile
    """

    def __init__(
        self,
        top_colors: int = TOP_COLORS,
        top_styles: int = TOP_STYLES,
        top_categories: int = TOP_CATEGORIES,
        top_brands: int = TOP_BRANDS,
    ):
        self.top_colors = top_colors
        self.top_styles = top_styles
        self.top_categories = top_categories
        self.top_brands = top_brands

    def build_profile(self, board: PinterestBoard) -> StyleProfile:
        """
        Build a style profile from a board's pins.

        Args:
            board: Board whose pins describe the user's taste

        Returns:
            Built StyleProfile
        """
        colors: list[str] = []
        styles: list[str] = []
        categories: list[str] = []
        brands: list[str] = []
        prices: list[float] = []

        for pin in board.pins:
            colors.extend(pin.colors)
            styles.extend(pin.style)
            categories.append(pin.category)
            if pin.brand:
                brands.append(pin.brand)
            # A zero price carries no price signal
            if pin.price:
                prices.append(pin.price)

        profile = StyleProfile(
            dominant_colors=self.top_n(self.frequency_map(colors), self.top_colors),
            style_keywords=self.top_n(self.frequency_map(styles), self.top_styles),
            preferred_categories=self.top_n(self.frequency_map(categories), self.top_categories),
            favored_brands=self.top_n(self.frequency_map(brands), self.top_brands),
            price_range=PriceRange(min=min(prices), max=max(prices)) if prices else None,
        )

        logger.debug(
            f"Built style profile for board {board.id} from {len(board.pins)} pins: "
            f"colors={profile.dominant_colors}, styles={profile.style_keywords}"
        )
        return profile

    @staticmethod
    def frequency_map(values: Iterable[str]) -> Counter:
        """Count normalized values. Values that normalize to nothing are skipped."""
        freq: Counter = Counter()
        for value in values:
            key = normalize_text(value)
            if key:
                freq[key] += 1
        return freq

    @staticmethod
    def top_n(freq: Counter, n: int) -> list[str]:
        """Top N keys by descending count; sorted() is stable so ties keep insertion order."""
        if n <= 0:
            return []
        return [key for key, _ in sorted(freq.items(), key=lambda x: x[1], reverse=True)[:n]]
