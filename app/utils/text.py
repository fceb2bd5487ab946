import re

_NON_WORD = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")

STYLE_VOCABULARY = (
    "casual",
    "formal",
    "elegant",
    "sporty",
    "bohemian",
    "vintage",
    "modern",
    "classic",
    "minimalist",
    "edgy",
    "romantic",
    "preppy",
    "streetwear",
    "chic",
    "sophisticated",
    "trendy",
    "retro",
    "grunge",
    "feminine",
    "masculine",
    "androgynous",
    "professional",
    "business",
    "athleisure",
    "luxury",
    "designer",
    "affordable",
    "sustainable",
)

COLOR_VOCABULARY = (
    "black",
    "white",
    "gray",
    "grey",
    "red",
    "blue",
    "green",
    "yellow",
    "orange",
    "purple",
    "pink",
    "brown",
    "beige",
    "tan",
    "navy",
    "maroon",
    "burgundy",
    "teal",
    "turquoise",
    "lavender",
    "cream",
    "ivory",
    "charcoal",
    "olive",
    "khaki",
    "coral",
    "mint",
    "sage",
    "mustard",
    "rust",
    "camel",
    "nude",
    "blush",
    "emerald",
    "cobalt",
    "crimson",
)


def normalize_text(text: str | None) -> str:
    """
    Lowercase, trim and strip punctuation.

    Keeps letters, digits, whitespace and hyphens; runs of whitespace collapse
    to a single space.
    """
    if not text:
        return ""
    cleaned = _NON_WORD.sub("", text.lower().strip())
    return _WHITESPACE.sub(" ", cleaned).strip()


def calculate_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity of the normalized word sets (0-1)."""
    words1 = set(normalize_text(text1).split())
    words2 = set(normalize_text(text2).split())

    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def extract_style_keywords(text: str) -> list[str]:
    """Return the known style keywords mentioned in a description."""
    normalized = normalize_text(text)
    return [keyword for keyword in STYLE_VOCABULARY if keyword in normalized]


def parse_colors(text: str) -> list[str]:
    normalized = normalize_text(text)
    return [color for color in COLOR_VOCABULARY if color in normalized]
