"""
Heuristic Markup Recipe Parser.

This module scans page markup for recipe fields when structured data is
missing or incomplete. Each field has an ordered chain of locators; the first
locator that yields a non-empty result decides the field and later locators
are not consulted.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from bs4 import BeautifulSoup, Tag

from ..models.recipe import PartialRecipe
from .base_parser import BaseRecipeParser
from .duration import parse_duration

_LOGGER = logging.getLogger(__name__)

Locator = Callable[[BeautifulSoup], list[Any]]


def _element_text(element: Tag) -> str:
    return element.get_text().strip()


def css_text(selector: str) -> Locator:
    """Locator returning the trimmed text of every element matching selector."""
    def locate(soup: BeautifulSoup) -> list[str]:
        texts = (_element_text(el) for el in soup.select(selector))
        return [text for text in texts if text]

    locate.__name__ = f"css_text({selector!r})"
    return locate


def recipe_itemprop_text(prop: str) -> Locator:
    """Locator returning microdata properties that belong to the Recipe itself.

    Properties of nested items (an author Person, a HowToStep) are skipped by
    checking the closest enclosing itemtype.
    """
    def locate(soup: BeautifulSoup) -> list[str]:
        texts = []
        for el in soup.select(f'[itemtype*="Recipe"] [itemprop="{prop}"]'):
            scope = el.find_parent(attrs={'itemtype': True})
            if scope is None or 'Recipe' not in scope.get('itemtype', ''):
                continue
            text = _element_text(el)
            if text:
                texts.append(text)
        return texts

    locate.__name__ = f"recipe_itemprop_text({prop!r})"
    return locate


def meta_content(selector: str) -> Locator:
    """Locator returning the content attribute of matching meta tags."""
    def locate(soup: BeautifulSoup) -> list[str]:
        values = (el.get('content') for el in soup.select(selector))
        return [value.strip() for value in values
                if isinstance(value, str) and value.strip()]

    locate.__name__ = f"meta_content({selector!r})"
    return locate


def css_duration(selector: str) -> Locator:
    """Locator returning minutes parsed from matching elements.

    Microdata durations usually live in a content or datetime attribute, so
    those are preferred over the visible text.
    """
    def locate(soup: BeautifulSoup) -> list[int]:
        minutes = []
        for el in soup.select(selector):
            raw = el.get('content') or el.get('datetime') or _element_text(el)
            value = parse_duration(raw if isinstance(raw, str) else None)
            if value is not None:
                minutes.append(value)
        return minutes

    locate.__name__ = f"css_duration({selector!r})"
    return locate


NAME_LOCATORS: tuple[Locator, ...] = (
    recipe_itemprop_text('name'),
    css_text('.recipe-title'),
    css_text('.recipe-name'),
)

# Page level heading used when no name locator matches
NAME_FALLBACK: Locator = css_text('h1')

DESCRIPTION_LOCATORS: tuple[Locator, ...] = (
    meta_content('meta[name="description"]'),
    meta_content('meta[property="og:description"]'),
)

CATEGORY_LOCATORS: tuple[Locator, ...] = (
    css_text('.recipe-category'),
    css_text('[itemprop="recipeCategory"]'),
    css_text('.category'),
)

COOK_TIME_LOCATORS: tuple[Locator, ...] = (
    css_duration('[itemprop="totalTime"]'),
    css_duration('.cook-time'),
    css_duration('.prep-time'),
)

INGREDIENT_LOCATORS: tuple[Locator, ...] = (
    css_text('[itemprop="recipeIngredient"]'),
    css_text('[itemprop="ingredients"]'),
    css_text('.ingredient'),
    css_text('.ingredients li'),
)

INSTRUCTION_LOCATORS: tuple[Locator, ...] = (
    css_text('[itemprop="recipeInstructions"]'),
    css_text('.instructions li'),
    css_text('.steps li'),
)


def first_match(soup: BeautifulSoup, locators: tuple[Locator, ...]) -> list[Any] | None:
    """Run locators in order and return the first non-empty result.

    Args:
        soup: The parsed page
        locators: Candidate locators, most specific first

    Returns:
        The values found by the winning locator, or None if none matched
    """
    for locator in locators:
        values = locator(soup)
        if values:
            _LOGGER.debug("%s matched %d element(s)", locator.__name__, len(values))
            return values
    return None


def _first(values: list[Any] | None) -> Any:
    return values[0] if values else None


class MarkupRecipeParser(BaseRecipeParser):
    """Extracts recipe fields from page markup using locator chains."""

    def __init__(self) -> None:
        """Initialize the markup recipe parser."""
        _LOGGER.debug("Initialized MarkupRecipeParser")

    def parse(self, soup: BeautifulSoup) -> PartialRecipe:
        """Resolve each recipe field independently from the markup.

        Args:
            soup: The parsed page

        Returns:
            PartialRecipe where unmatched fields are left as None
        """
        name = _first(first_match(soup, NAME_LOCATORS))
        if name is None:
            name = _first(NAME_FALLBACK(soup))

        recipe = PartialRecipe(
            name=name,
            description=_first(first_match(soup, DESCRIPTION_LOCATORS)),
            category=_first(first_match(soup, CATEGORY_LOCATORS)),
            cook_time=_first(first_match(soup, COOK_TIME_LOCATORS)),
            ingredients=first_match(soup, INGREDIENT_LOCATORS),
            instructions=first_match(soup, INSTRUCTION_LOCATORS),
        )
        _LOGGER.debug("Markup resolved fields: %s",
                      sorted(recipe.model_dump(exclude_none=True)))
        return recipe
