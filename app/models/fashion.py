from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Category = Literal["tops", "bottoms", "dresses", "outerwear", "shoes", "accessories"]


class FashionItem(BaseModel):
    """
    A single fashion item, either a pin saved on a board or a catalog entry.

    Immutable once constructed. Accepts camelCase keys (``imageUrl``) as well
    as field names when parsing JSON.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    category: Category
    colors: list[str] = Field(default_factory=list)
    style: list[str] = Field(default_factory=list)
    price: float | None = Field(default=None, ge=0)
    brand: str | None = None
    tags: list[str] = Field(default_factory=list)


class PinterestBoard(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    pins: list[FashionItem] = Field(default_factory=list)


class PriceRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def _check_bounds(self) -> "PriceRange":
        if self.min > self.max:
            raise ValueError("price range min must not exceed max")
        return self

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max


class StyleProfile(BaseModel):
    """
    Read-only snapshot of a board's dominant preferences.

    Every list holds normalized keys ordered by descending frequency.
    Rebuilt wholesale on each board analysis, never updated in place.
    """

    model_config = ConfigDict(frozen=True)

    dominant_colors: list[str] = Field(default_factory=list, description="Top colors by frequency")
    style_keywords: list[str] = Field(default_factory=list, description="Top style keywords by frequency")
    preferred_categories: list[str] = Field(default_factory=list, description="Top categories by frequency")
    favored_brands: list[str] = Field(default_factory=list, description="Top brands by frequency")
    price_range: PriceRange | None = Field(default=None, description="Observed min/max price, if any pin is priced")

    @property
    def is_empty(self) -> bool:
        return not (
            self.dominant_colors
            or self.style_keywords
            or self.preferred_categories
            or self.favored_brands
            or self.price_range
        )


class ScoreBreakdown(BaseModel):
    color: float
    style: float
    category: float
    brand: float
    price: float
    total: float


class Recommendation(BaseModel):
    item: FashionItem
    score: float = Field(ge=0.0, le=1.0)
    reasons: list[str] = Field(default_factory=list)


class WardrobeGap(BaseModel):
    category: Category
    current_count: int
    suggested_count: int
    priority: Literal["high", "medium"]


class PriceDistribution(BaseModel):
    budget: int = 0
    mid_range: int = 0
    premium: int = 0


class BudgetSummary(BaseModel):
    total_items: int
    total_cost: float
    average_price: float | None = None
    price_distribution: PriceDistribution = Field(default_factory=PriceDistribution)
    by_category: dict[str, list[str]] = Field(default_factory=dict, description="Category → recommended item ids")
