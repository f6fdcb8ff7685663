"""Models package."""
from .recipe import (
    Ingredient,
    MealPlan,
    PartialRecipe,
    Recipe,
    RecipeDraft,
    ShoppingListItem,
)

__all__ = [
    "Ingredient",
    "MealPlan",
    "PartialRecipe",
    "Recipe",
    "RecipeDraft",
    "ShoppingListItem",
]
