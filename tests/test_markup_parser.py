from __future__ import annotations

import unittest

from bs4 import BeautifulSoup

from custom_components.meal_planner.parsers.markup_parser import (
    MarkupRecipeParser,
    css_text,
    first_match,
)


def soup_of(body: str, head: str = "") -> BeautifulSoup:
    return BeautifulSoup(
        f"<html><head>{head}</head><body>{body}</body></html>",
        features="html.parser",
    )


class MarkupRecipeParserTests(unittest.TestCase):
    def setUp(self) -> None:
        self.parser = MarkupRecipeParser()

    def test_resolves_fields_from_class_locators(self) -> None:
        soup = soup_of(
            """
            <h1>Page Heading</h1>
            <div class="recipe-category">Soup</div>
            <span class="cook-time">About 20 minutes</span>
            <ul class="ingredients"><li> Tofu </li><li>  </li><li>Wakame</li></ul>
            <ol class="steps"><li>Boil water</li><li>Add miso</li></ol>
            """,
            head='<meta name="description" content=" A warm soup ">',
        )
        result = self.parser.parse(soup)

        self.assertEqual(result.name, "Page Heading")
        self.assertEqual(result.description, "A warm soup")
        self.assertEqual(result.category, "Soup")
        self.assertEqual(result.cook_time, 20)
        self.assertEqual(result.ingredients, ["Tofu", "Wakame"])
        self.assertEqual(result.instructions, ["Boil water", "Add miso"])

    def test_first_matching_locator_is_not_merged_with_later_ones(self) -> None:
        soup = soup_of(
            """
            <span itemprop="recipeIngredient">豆腐</span>
            <span itemprop="recipeIngredient">わかめ</span>
            <ul class="ingredients"><li>長ねぎ</li></ul>
            """
        )
        result = self.parser.parse(soup)
        self.assertEqual(result.ingredients, ["豆腐", "わかめ"])

    def test_empty_match_falls_through_to_next_locator(self) -> None:
        soup = soup_of('<div class="recipe-category">  </div><div class="category">Main</div>')
        result = self.parser.parse(soup)
        self.assertEqual(result.category, "Main")

    def test_duration_without_digits_falls_through(self) -> None:
        soup = soup_of('<span class="cook-time">quick</span><span class="prep-time">10 min</span>')
        result = self.parser.parse(soup)
        self.assertEqual(result.cook_time, 10)

    def test_microdata_duration_attribute(self) -> None:
        soup = soup_of('<div itemscope><meta itemprop="totalTime" content="PT45M"></div>')
        result = self.parser.parse(soup)
        self.assertEqual(result.cook_time, 45)

    def test_name_locator_beats_page_heading(self) -> None:
        soup = soup_of('<h1>Site name</h1><h2 class="recipe-title">Ratatouille</h2>')
        result = self.parser.parse(soup)
        self.assertEqual(result.name, "Ratatouille")

    def test_inner_whitespace_is_kept(self) -> None:
        soup = soup_of("<ol class=\"steps\"><li>\n  Add\n  miso \n</li></ol>")
        result = self.parser.parse(soup)
        self.assertEqual(result.instructions, ["Add\n  miso"])

    def test_recipe_name_skips_nested_item_names(self) -> None:
        soup = soup_of(
            """
            <div itemscope itemtype="https://schema.org/Recipe">
              <div itemprop="author" itemscope itemtype="https://schema.org/Person">
                <span itemprop="name">Hanako Yamada</span>
              </div>
              <h2 itemprop="name">Nikujaga</h2>
              <div itemprop="recipeInstructions" itemscope itemtype="https://schema.org/HowToStep">
                <span itemprop="name">Step one</span>
              </div>
            </div>
            """
        )
        result = self.parser.parse(soup)
        self.assertEqual(result.name, "Nikujaga")

    def test_unmatched_fields_stay_unresolved(self) -> None:
        result = self.parser.parse(soup_of("<p>Nothing to see here</p>"))
        self.assertEqual(result.model_dump(exclude_none=True), {})


class FirstMatchTests(unittest.TestCase):
    def test_returns_none_when_no_locator_matches(self) -> None:
        soup = soup_of("<p>text</p>")
        self.assertIsNone(first_match(soup, (css_text(".a"), css_text(".b"))))

    def test_stops_at_first_non_empty_locator(self) -> None:
        calls = []

        def tracking(values):
            def locate(soup):
                calls.append(values)
                return values
            locate.__name__ = "tracking"
            return locate

        soup = soup_of("<p>text</p>")
        result = first_match(soup, (tracking([]), tracking(["x"]), tracking(["y"])))
        self.assertEqual(result, ["x"])
        self.assertEqual(calls, [[], ["x"]])


if __name__ == "__main__":
    unittest.main()
