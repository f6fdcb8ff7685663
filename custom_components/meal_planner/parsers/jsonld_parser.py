"""
JSON-LD Recipe Parser.

This module handles parsing of structured recipe data embedded in pages as
``<script type="application/ld+json">`` blocks following the Schema.org
Recipe format.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from bs4 import BeautifulSoup

from ..models.recipe import PartialRecipe
from .base_parser import BaseRecipeParser
from .duration import parse_duration

_LOGGER = logging.getLogger(__name__)

# Checked in order, the first key present decides the cooking time
DURATION_KEYS = ("totalTime", "cookTime")


def is_recipe(item: Any) -> bool:
    """Check if a JSON-LD item represents a Recipe."""
    if not isinstance(item, dict):
        return False
    item_type = item.get('@type')
    if isinstance(item_type, str):
        return item_type == 'Recipe'
    elif isinstance(item_type, list):
        return 'Recipe' in item_type
    return False


def find_recipe(parsed_data: Any) -> dict[str, Any] | None:
    """Locate the Recipe object inside a decoded JSON-LD document.

    Args:
        parsed_data: The decoded JSON value of one block

    Returns:
        The first Recipe-typed object, or None
    """
    if isinstance(parsed_data, list):
        return next((item for item in parsed_data if is_recipe(item)), None)

    if isinstance(parsed_data, dict):
        if is_recipe(parsed_data):
            return parsed_data
        graph = parsed_data.get('@graph')
        if isinstance(graph, list):
            return next((item for item in graph if is_recipe(item)), None)

    return None


def _text(value: Any) -> str | None:
    """Return stripped text, or None for empty and non-string values."""
    if isinstance(value, list):
        value = next((v for v in value if isinstance(v, str) and v.strip()), None)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class JSONLDRecipeParser(BaseRecipeParser):
    """Parses recipe data from structured JSON-LD blocks.

    Blocks are scanned in document order and the first one holding a Recipe
    wins. Blocks that fail to decode are skipped.
    """

    def __init__(self) -> None:
        """Initialize the JSON-LD recipe parser."""
        _LOGGER.debug("Initialized JSONLDRecipeParser")

    def find_recipe_data(self, soup: BeautifulSoup) -> dict[str, Any] | None:
        """Return the first Recipe object embedded in the page, if any."""
        json_lds = soup.find_all('script', type='application/ld+json')
        _LOGGER.debug("Found %d JSON-LD scripts", len(json_lds))

        for idx, json_ld in enumerate(json_lds):
            raw = json_ld.string or json_ld.get_text()
            if not raw or not raw.strip():
                continue

            try:
                parsed_data = json.loads(raw, strict=False)
            except (json.JSONDecodeError, TypeError) as e:
                _LOGGER.debug("Failed to parse JSON-LD script %d: %s", idx, e)
                continue

            data = find_recipe(parsed_data)
            if data:
                _LOGGER.debug("Found recipe data in JSON-LD script %d", idx)
                return data

        return None

    def _parse_ingredients(self, value: Any) -> list[str] | None:
        """Map recipeIngredient to raw ingredient lines."""
        if not isinstance(value, list):
            return None
        return [line.strip() for line in value
                if isinstance(line, str) and line.strip()]

    def _parse_instructions(self, value: Any) -> list[str] | None:
        """Map recipeInstructions to one string per step.

        Accepts a single string, a list of strings, a list of HowToStep
        objects, or HowToSection objects wrapping further steps.
        """
        if isinstance(value, str):
            text = value.strip()
            return [text] if text else None

        if isinstance(value, dict):
            value = [value]

        if not isinstance(value, list):
            return None

        steps = []
        for step in value:
            if isinstance(step, dict):
                if step.get('@type') == 'HowToSection':
                    steps.extend(self._parse_instructions(
                        step.get('itemListElement')) or [])
                    continue
                step = step.get('text')
            if isinstance(step, str) and step.strip():
                steps.append(step.strip())
        return steps

    def _parse_cook_time(self, data: dict[str, Any]) -> int | None:
        for key in DURATION_KEYS:
            if data.get(key):
                return parse_duration(data[key])
        return None

    def parse(self, soup: BeautifulSoup) -> PartialRecipe:
        """Extract recipe fields from the first JSON-LD Recipe block.

        Args:
            soup: The parsed page

        Returns:
            PartialRecipe with the fields the block provides; all None if the
            page carries no Recipe block
        """
        data = self.find_recipe_data(soup)
        if not data:
            return PartialRecipe()

        recipe = PartialRecipe(
            name=_text(data.get('name')),
            description=_text(data.get('description')),
            category=_text(data.get('recipeCategory')),
            cook_time=self._parse_cook_time(data),
            ingredients=self._parse_ingredients(data.get('recipeIngredient')),
            instructions=self._parse_instructions(data.get('recipeInstructions')),
        )
        _LOGGER.debug("JSON-LD resolved fields: %s",
                      sorted(recipe.model_dump(exclude_none=True)))
        return recipe
