from __future__ import annotations

import unittest
from datetime import date

from custom_components.meal_planner.models.recipe import Ingredient, RecipeDraft
from custom_components.meal_planner.services.shopping_list import ShoppingListConsolidator
from custom_components.meal_planner.storage import MealPlannerStore


def add_recipe(store: MealPlannerStore, name: str, ingredients: list[tuple[str, str]]) -> int:
    recipe = store.add_recipe(RecipeDraft(
        name=name,
        category="主菜",
        cook_time=30,
        ingredients=[Ingredient(name=n, amount=a) for n, a in ingredients],
    ))
    return recipe.id


def snapshot(items) -> list[tuple[str, str, str, bool]]:
    return [(item.name, item.amount, item.category, item.checked) for item in items]


class ShoppingListConsolidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MealPlannerStore()
        self.consolidator = ShoppingListConsolidator(self.store)
        soup = add_recipe(self.store, "具沢山味噌汁", [
            ("豆腐", "1/2丁"), ("わかめ", "10g"), ("にんじん", "1/4本"), ("onion", "1"),
        ])
        stew = add_recipe(self.store, "牛肉の赤ワイン煮込み", [
            ("牛肉（煮込み用）", "500g"), ("にんじん", "2本"), ("onion", "2"),
        ])
        self.soup_plan = self.store.add_meal_plan(date(2024, 5, 1), "dinner", soup).id
        self.stew_plan = self.store.add_meal_plan(date(2024, 5, 2), "dinner", stew).id

    def test_first_seen_amount_wins(self) -> None:
        items = self.consolidator.generate([self.soup_plan, self.stew_plan])

        onions = [item for item in items if item.name == "onion"]
        self.assertEqual(len(onions), 1)
        self.assertEqual(onions[0].amount, "1")

    def test_items_follow_recipe_then_ingredient_order(self) -> None:
        items = self.consolidator.generate([self.soup_plan, self.stew_plan])

        self.assertEqual(snapshot(items), [
            ("豆腐", "1/2丁", "protein", False),
            ("わかめ", "10g", "other", False),
            ("にんじん", "1/4本", "vegetables", False),
            ("onion", "1", "vegetables", False),
            ("牛肉（煮込み用）", "500g", "protein", False),
        ])
        self.assertEqual([item.id for item in items], [1, 2, 3, 4, 5])

    def test_names_are_unique(self) -> None:
        items = self.consolidator.generate([self.soup_plan, self.stew_plan, self.soup_plan])
        names = [item.name for item in items]
        self.assertEqual(len(names), len(set(names)))

    def test_dangling_meal_plan_is_skipped(self) -> None:
        expected = snapshot(self.consolidator.generate([self.soup_plan]))
        items = self.consolidator.generate([self.soup_plan, 999])
        self.assertEqual(snapshot(items), expected)

    def test_meal_plan_with_deleted_recipe_is_skipped(self) -> None:
        stew_recipe = self.store.get_meal_plan(self.stew_plan).recipe_id
        self.store.delete_recipe(stew_recipe)

        items = self.consolidator.generate([self.stew_plan])
        self.assertEqual(items, [])
        self.assertEqual(self.store.list_shopping_items(), [])

    def test_regeneration_is_idempotent(self) -> None:
        first = self.consolidator.generate([self.soup_plan, self.stew_plan])
        second = self.consolidator.generate([self.soup_plan, self.stew_plan])

        self.assertEqual(snapshot(first), snapshot(second))
        self.assertEqual([item.id for item in second], [item.id for item in first])

    def test_regeneration_discards_checked_state(self) -> None:
        self.consolidator.generate([self.soup_plan])
        self.store.set_item_checked(1, True)

        items = self.consolidator.generate([self.soup_plan])

        self.assertFalse(any(item.checked for item in items))
        self.assertEqual(self.store.list_shopping_items(), items)

    def test_empty_selection_clears_list(self) -> None:
        self.consolidator.generate([self.soup_plan])
        self.assertEqual(self.consolidator.generate([]), [])
        self.assertEqual(self.store.list_shopping_items(), [])


if __name__ == "__main__":
    unittest.main()
