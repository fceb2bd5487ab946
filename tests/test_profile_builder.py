from app.services.profile.builder import StyleProfileBuilder
from tests.factories import make_board, make_item


def test_empty_board_yields_empty_profile():
    profile = StyleProfileBuilder().build_profile(make_board())

    assert profile.dominant_colors == []
    assert profile.style_keywords == []
    assert profile.preferred_categories == []
    assert profile.favored_brands == []
    assert profile.price_range is None
    assert profile.is_empty


def test_keys_are_normalized_and_counted_together():
    board = make_board(
        make_item("a", colors=["Black ", "white"]),
        make_item("b", colors=["black!"]),
    )

    profile = StyleProfileBuilder().build_profile(board)

    assert profile.dominant_colors == ["black", "white"]


def test_ties_keep_first_seen_order():
    board = make_board(
        make_item("a", style=["edgy", "boho"]),
        make_item("b", style=["classic", "boho"]),
        make_item("c", style=["classic"]),
    )

    profile = StyleProfileBuilder().build_profile(board)

    # boho and classic tie at 2; boho was seen first
    assert profile.style_keywords == ["boho", "classic", "edgy"]


def test_top_n_limits_are_applied():
    pins = [make_item(f"p{i}", colors=[f"color{i}"], brand=f"Brand {i}") for i in range(10)]

    profile = StyleProfileBuilder().build_profile(make_board(*pins))

    assert len(profile.dominant_colors) == 5
    assert len(profile.favored_brands) == 5
    assert profile.dominant_colors[0] == "color0"


def test_price_range_ignores_unpriced_pins():
    board = make_board(
        make_item("a", price=40),
        make_item("b"),
        make_item("c", price=120.5),
    )

    profile = StyleProfileBuilder().build_profile(board)

    assert profile.price_range.min == 40
    assert profile.price_range.max == 120.5


def test_zero_priced_pins_do_not_widen_the_range():
    board = make_board(make_item("a", price=0), make_item("b", price=80))

    profile = StyleProfileBuilder().build_profile(board)

    assert (profile.price_range.min, profile.price_range.max) == (80, 80)


def test_only_zero_priced_pins_give_no_range():
    profile = StyleProfileBuilder().build_profile(make_board(make_item("a", price=0)))

    assert profile.price_range is None


def test_blank_values_are_skipped():
    board = make_board(make_item("a", colors=["!!", "  ", "red"], brand=""))

    profile = StyleProfileBuilder().build_profile(board)

    assert profile.dominant_colors == ["red"]
    assert profile.favored_brands == []


def test_sample_board_profile(sample_board):
    profile = StyleProfileBuilder().build_profile(sample_board)

    assert profile.dominant_colors == ["cream", "beige", "white", "black", "camel"]
    assert profile.style_keywords == [
        "minimalist",
        "classic",
        "elegant",
        "comfortable",
        "casual",
        "professional",
        "modern",
        "feminine",
    ]
    assert profile.preferred_categories == ["tops", "outerwear", "bottoms"]
    assert profile.favored_brands == ["everlane", "massimo dutti", "mango", "cos", "other stories"]
    assert (profile.price_range.min, profile.price_range.max) == (35, 350)


def test_custom_limits():
    board = make_board(make_item("a", category="shoes"), make_item("b", category="tops"))

    profile = StyleProfileBuilder(top_categories=1).build_profile(board)

    assert profile.preferred_categories == ["shoes"]
