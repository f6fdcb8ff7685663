"""
Ingredient Classifier.

Maps an ingredient display name onto a coarse shopping list category using
keyword substring matching. Matching is case-sensitive and protein keywords
are checked before vegetable keywords.
"""
from __future__ import annotations

from ..const import CATEGORY_OTHER, CATEGORY_PROTEIN, CATEGORY_VEGETABLES

# Meat, fish and tofu style terms
PROTEIN_KEYWORDS = (
    # Japanese
    "肉",
    "魚",
    "鮭",
    "豆腐",
    # English
    "meat",
    "beef",
    "pork",
    "chicken",
    "fish",
    "salmon",
    "tofu",
)

VEGETABLE_KEYWORDS = (
    # Japanese
    "野菜",
    "人参",
    "玉ねぎ",
    "パプリカ",
    "ズッキーニ",
    "ナス",
    "にんじん",
    "セロリ",
    # English
    "vegetable",
    "carrot",
    "onion",
    "paprika",
    "zucchini",
    "eggplant",
    "celery",
)


def classify_ingredient(name: str) -> str:
    """Return the shopping list category for an ingredient name.

    Args:
        name: The ingredient display name

    Returns:
        'protein', 'vegetables' or 'other'
    """
    if any(keyword in name for keyword in PROTEIN_KEYWORDS):
        return CATEGORY_PROTEIN
    if any(keyword in name for keyword in VEGETABLE_KEYWORDS):
        return CATEGORY_VEGETABLES
    return CATEGORY_OTHER
