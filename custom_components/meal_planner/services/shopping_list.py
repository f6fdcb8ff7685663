"""
Shopping List Consolidator.

This module builds a deduplicated, categorized shopping list from the
recipes referenced by a set of meal plans and writes it to the store as a
full replacement of the previous list.
"""
from __future__ import annotations

import logging
from typing import Iterable

from ..models.recipe import Recipe, ShoppingListItem
from ..storage import MealPlannerStore
from .ingredient_classifier import classify_ingredient

_LOGGER = logging.getLogger(__name__)


class ShoppingListConsolidator:
    """Consolidates meal plan ingredients into the shopping list."""

    def __init__(self, store: MealPlannerStore) -> None:
        self.store = store

    def resolve_recipes(self, meal_plan_ids: Iterable[int]) -> list[Recipe]:
        """Resolve meal plan ids to recipes, skipping dangling references."""
        recipes = []
        for meal_plan_id in meal_plan_ids:
            meal_plan = self.store.get_meal_plan(meal_plan_id)
            if meal_plan is None:
                _LOGGER.debug("Skipping unknown meal plan %s", meal_plan_id)
                continue

            recipe = self.store.get_recipe(meal_plan.recipe_id)
            if recipe is None:
                _LOGGER.debug("Skipping meal plan %s: recipe %s no longer exists",
                              meal_plan_id, meal_plan.recipe_id)
                continue

            recipes.append(recipe)
        return recipes

    @staticmethod
    def consolidate(recipes: Iterable[Recipe]) -> list[dict[str, str]]:
        """Flatten and deduplicate ingredients by exact name.

        The first amount seen for a name is kept; later amounts for the same
        name are dropped without any numeric merging.

        Args:
            recipes: Recipes in meal plan order

        Returns:
            One entry per distinct ingredient name with its category
        """
        entries: dict[str, dict[str, str]] = {}
        for recipe in recipes:
            for ingredient in recipe.ingredients:
                if ingredient.name in entries:
                    continue
                entries[ingredient.name] = {
                    "name": ingredient.name,
                    "amount": ingredient.amount,
                    "category": classify_ingredient(ingredient.name),
                }
        return list(entries.values())

    def generate(self, meal_plan_ids: Iterable[int]) -> list[ShoppingListItem]:
        """Rebuild the shopping list from the given meal plans.

        The existing list is replaced wholesale, including any items the
        user has checked, and ids restart from 1.

        Args:
            meal_plan_ids: Meal plan identifiers; unknown ids are ignored

        Returns:
            The new shopping list items
        """
        recipes = self.resolve_recipes(meal_plan_ids)
        entries = self.consolidate(recipes)
        items = self.store.replace_shopping_list(entries)

        _LOGGER.info("Generated shopping list with %d items from %d recipes",
                     len(items), len(recipes))
        return items
