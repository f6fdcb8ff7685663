from __future__ import annotations

import unittest
from datetime import date

from custom_components.meal_planner.models.recipe import Ingredient, RecipeDraft
from custom_components.meal_planner.storage import MealPlannerStore


def draft(name: str, category: str = "主菜", cook_time: int = 30, description: str = "") -> RecipeDraft:
    return RecipeDraft(
        name=name,
        description=description,
        category=category,
        cook_time=cook_time,
        ingredients=[Ingredient(name="塩", amount="少々")],
    )


class MealPlannerStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MealPlannerStore()

    def test_recipe_ids_are_sequential(self) -> None:
        first = self.store.add_recipe(draft("A"))
        second = self.store.add_recipe(draft("B"), calories=320)

        self.assertEqual((first.id, second.id), (1, 2))
        self.assertEqual(second.calories, 320)
        self.assertEqual(self.store.get_recipe(2).ingredients[0].name, "塩")

    def test_delete_recipe(self) -> None:
        recipe = self.store.add_recipe(draft("A"))
        self.assertTrue(self.store.delete_recipe(recipe.id))
        self.assertFalse(self.store.delete_recipe(recipe.id))
        self.assertIsNone(self.store.get_recipe(recipe.id))

    def test_search_recipes(self) -> None:
        self.store.add_recipe(draft("鮭の塩焼き", category="主菜", cook_time=25))
        self.store.add_recipe(draft("Miso Soup", category="スープ", cook_time=15,
                                    description="Warm soup"))
        self.store.add_recipe(draft("Beef stew", category="主菜", cook_time=90))

        self.assertEqual([r.name for r in self.store.search_recipes("SOUP")], ["Miso Soup"])
        self.assertEqual(len(self.store.search_recipes(category="主菜")), 2)
        self.assertEqual(
            [r.name for r in self.store.search_recipes(category="主菜", max_cook_time=30)],
            ["鮭の塩焼き"],
        )

    def test_meal_plan_date_range(self) -> None:
        self.store.add_meal_plan(date(2024, 5, 1), "dinner", 1)
        self.store.add_meal_plan(date(2024, 5, 3), "lunch", 1)
        self.store.add_meal_plan(date(2024, 5, 7), "breakfast", 1)

        plans = self.store.list_meal_plans(date(2024, 5, 1), date(2024, 5, 3))
        self.assertEqual([plan.id for plan in plans], [1, 2])
        self.assertEqual(len(self.store.list_meal_plans()), 3)

    def test_replace_shopping_list_restarts_ids(self) -> None:
        self.store.replace_shopping_list([
            {"name": "a", "amount": "1", "category": "other"},
            {"name": "b", "amount": "2", "category": "other"},
        ])
        self.store.set_item_checked(2, True)

        items = self.store.replace_shopping_list([
            {"name": "c", "amount": "3", "category": "vegetables"},
        ])

        self.assertEqual([(item.id, item.name, item.checked) for item in items],
                         [(1, "c", False)])
        self.assertEqual(self.store.list_shopping_items(), items)

    def test_set_item_checked(self) -> None:
        self.store.replace_shopping_list([{"name": "a", "amount": "1", "category": "other"}])

        item = self.store.set_item_checked(1, True)
        self.assertTrue(item.checked)
        self.assertTrue(self.store.list_shopping_items()[0].checked)
        self.assertIsNone(self.store.set_item_checked(99, True))


if __name__ == "__main__":
    unittest.main()
