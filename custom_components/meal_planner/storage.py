"""
In-memory record store for recipes, meal plans and shopping list items.

Each table is a dict keyed by an integer id issued from a per-table counter
starting at 1. The shopping list is only ever rebuilt through
replace_shopping_list, which swaps the whole table under the store lock.
"""
from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Iterable

from .models.recipe import MealPlan, Recipe, RecipeDraft, ShoppingListItem

_LOGGER = logging.getLogger(__name__)


class MealPlannerStore:
    """Keyed record store backing the Meal Planner services."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._recipes: dict[int, Recipe] = {}
        self._meal_plans: dict[int, MealPlan] = {}
        self._shopping_items: dict[int, ShoppingListItem] = {}
        self._recipe_id = 1
        self._meal_plan_id = 1

    # Recipes

    def add_recipe(self, draft: RecipeDraft, **extra) -> Recipe:
        """Persist a draft as a new Recipe.

        Args:
            draft: The normalized draft
            **extra: Optional nutrition and presentation fields

        Returns:
            The stored recipe with its assigned id
        """
        with self._lock:
            recipe = Recipe(id=self._recipe_id, **draft.model_dump(), **extra)
            self._recipes[recipe.id] = recipe
            self._recipe_id += 1
        _LOGGER.debug("Stored recipe %d '%s'", recipe.id, recipe.name)
        return recipe

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        with self._lock:
            return self._recipes.get(recipe_id)

    def list_recipes(self) -> list[Recipe]:
        with self._lock:
            return list(self._recipes.values())

    def delete_recipe(self, recipe_id: int) -> bool:
        with self._lock:
            return self._recipes.pop(recipe_id, None) is not None

    def search_recipes(
        self,
        query: str | None = None,
        category: str | None = None,
        max_cook_time: int | None = None,
    ) -> list[Recipe]:
        """Filter recipes by text, exact category and maximum cooking time."""
        recipes = self.list_recipes()

        if query:
            needle = query.lower()
            recipes = [
                recipe for recipe in recipes
                if needle in recipe.name.lower() or needle in recipe.description.lower()
            ]
        if category:
            recipes = [recipe for recipe in recipes if recipe.category == category]
        if max_cook_time:
            recipes = [recipe for recipe in recipes if recipe.cook_time <= max_cook_time]

        return recipes

    # Meal plans

    def add_meal_plan(self, plan_date: date, meal_type: str, recipe_id: int) -> MealPlan:
        with self._lock:
            meal_plan = MealPlan(
                id=self._meal_plan_id,
                date=plan_date,
                meal_type=meal_type,
                recipe_id=recipe_id,
            )
            self._meal_plans[meal_plan.id] = meal_plan
            self._meal_plan_id += 1
        return meal_plan

    def get_meal_plan(self, meal_plan_id: int) -> MealPlan | None:
        with self._lock:
            return self._meal_plans.get(meal_plan_id)

    def list_meal_plans(self, start: date | None = None, end: date | None = None) -> list[MealPlan]:
        """Return meal plans, optionally limited to an inclusive date range."""
        with self._lock:
            plans = list(self._meal_plans.values())
        if start:
            plans = [plan for plan in plans if plan.date >= start]
        if end:
            plans = [plan for plan in plans if plan.date <= end]
        return plans

    def delete_meal_plan(self, meal_plan_id: int) -> bool:
        with self._lock:
            return self._meal_plans.pop(meal_plan_id, None) is not None

    # Shopping list

    def list_shopping_items(self) -> list[ShoppingListItem]:
        with self._lock:
            return list(self._shopping_items.values())

    def set_item_checked(self, item_id: int, checked: bool) -> ShoppingListItem | None:
        with self._lock:
            item = self._shopping_items.get(item_id)
            if item is None:
                return None
            item = item.model_copy(update={"checked": checked})
            self._shopping_items[item_id] = item
            return item

    def replace_shopping_list(self, entries: Iterable[dict]) -> list[ShoppingListItem]:
        """Replace the whole shopping list in one step.

        Existing items are discarded regardless of their checked state and
        ids restart from 1. Readers holding the lock never observe a
        partially rebuilt list.

        Args:
            entries: Item fields (name, amount, category) in display order

        Returns:
            The newly stored items
        """
        items = [
            ShoppingListItem(id=item_id, checked=False, **entry)
            for item_id, entry in enumerate(entries, start=1)
        ]
        with self._lock:
            self._shopping_items = {item.id: item for item in items}
        _LOGGER.debug("Replaced shopping list with %d items", len(items))
        return items
