from __future__ import annotations

import unittest

from custom_components.meal_planner.services.ingredient_classifier import classify_ingredient


class ClassifyIngredientTests(unittest.TestCase):
    def test_protein_terms(self) -> None:
        self.assertEqual(classify_ingredient("牛肉（煮込み用）"), "protein")
        self.assertEqual(classify_ingredient("生鮭"), "protein")
        self.assertEqual(classify_ingredient("豆腐"), "protein")
        self.assertEqual(classify_ingredient("chicken thighs"), "protein")

    def test_vegetable_terms(self) -> None:
        self.assertEqual(classify_ingredient("玉ねぎ"), "vegetables")
        self.assertEqual(classify_ingredient("にんじん"), "vegetables")
        self.assertEqual(classify_ingredient("red onion"), "vegetables")

    def test_protein_wins_over_vegetable(self) -> None:
        self.assertEqual(classify_ingredient("野菜と豚肉"), "protein")

    def test_fallback_is_other(self) -> None:
        self.assertEqual(classify_ingredient("味噌"), "other")
        self.assertEqual(classify_ingredient(""), "other")

    def test_matching_is_case_sensitive(self) -> None:
        self.assertEqual(classify_ingredient("Tofu"), "other")
        self.assertEqual(classify_ingredient("tofu"), "protein")

    def test_deterministic(self) -> None:
        results = {classify_ingredient("セロリ") for _ in range(5)}
        self.assertEqual(results, {"vegetables"})


if __name__ == "__main__":
    unittest.main()
