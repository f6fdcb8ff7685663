"""
Recipe data models for the Meal Planner integration.

This module defines the Pydantic models shared by the extraction pipeline,
the record store and the shopping list consolidator.
"""
from __future__ import annotations

import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MealType = Literal["breakfast", "lunch", "dinner"]
ShoppingCategory = Literal["vegetables", "protein", "other"]


class Ingredient(BaseModel):
    """A single ingredient line of a recipe.

    Attributes:
        name: The display name of the ingredient (e.g., '玉ねぎ', 'Tofu')
        amount: Free text amount, never parsed (e.g., '2個', 'as needed')
    """

    name: str = Field(
        description="The display name of the ingredient, e.g., 'onion'"
    )
    amount: str = Field(
        description="Free text amount, e.g., '1/2本' or 'as needed'"
    )


class PartialRecipe(BaseModel):
    """Fields found by a single extractor.

    A value of None means the extractor could not resolve the field. Lists
    hold raw text lines in document order.
    """

    name: str | None = None
    description: str | None = None
    category: str | None = None
    cook_time: int | None = None
    ingredients: list[str] | None = None
    instructions: list[str] | None = None

    def overlay(self, other: PartialRecipe) -> PartialRecipe:
        """Return a copy where every field resolved in other replaces ours."""
        return self.model_copy(update=other.model_dump(exclude_none=True))


class RecipeDraft(BaseModel):
    """The normalized output of a single extraction call.

    Sequence fields are tuples so a draft cannot be changed after creation.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="The recipe name")
    description: str = Field(default="", description="Short description")
    category: str = Field(description="Free text category, e.g., 'soup'")
    cook_time: int = Field(ge=0, description="Cooking time in minutes")
    servings: int = Field(default=2, description="Number of servings")
    ingredients: tuple[Ingredient, ...] = Field(default_factory=tuple)
    instructions: tuple[str, ...] = Field(
        default_factory=tuple,
        description="One entry per step, in cooking order"
    )
    tags: tuple[str, ...] = Field(default_factory=tuple)
    source_url: str | None = None


class Recipe(RecipeDraft):
    """A persisted recipe with its store identifier."""

    id: int
    calories: int | None = None
    protein: int | None = Field(default=None, description="Grams of protein")
    carbs: int | None = Field(default=None, description="Grams of carbohydrate")
    fat: int | None = Field(default=None, description="Grams of fat")
    image_url: str | None = None


class MealPlan(BaseModel):
    """One recipe scheduled for one date and meal slot."""

    id: int
    date: datetime.date
    meal_type: MealType
    recipe_id: int


class ShoppingListItem(BaseModel):
    """A single consolidated shopping list entry."""

    id: int
    name: str
    amount: str
    category: ShoppingCategory = "other"
    checked: bool = False
