"""
Recipe normalization engine.

This module turns raw page markup into a RecipeDraft by running the
heuristic markup parser and the JSON-LD parser, overlaying the structured
result on the heuristic one, and filling defaults for anything unresolved.
"""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from ..const import (
    DEFAULT_COOK_TIME,
    DEFAULT_LANGUAGE,
    DEFAULT_SERVINGS,
    LOCALIZED_DEFAULTS,
)
from ..exceptions import ExtractionFailure
from ..models.recipe import Ingredient, PartialRecipe, RecipeDraft
from ..parsers.jsonld_parser import JSONLDRecipeParser
from ..parsers.markup_parser import MarkupRecipeParser

_LOGGER = logging.getLogger(__name__)


class RecipeNormalizer:
    """Builds a normalized RecipeDraft from page markup.

    The normalizer never fetches or persists anything; it is a pure function
    of the markup it is given.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, fallback_name: str | None = None) -> None:
        """Initialize the normalizer.

        Args:
            language: Selects the placeholder texts ('en' or 'ja')
            fallback_name: Name used when no extractor finds one. When None,
                a missing name raises ExtractionFailure.

        Raises:
            ValueError: If language is not supported
        """
        if language not in LOCALIZED_DEFAULTS:
            raise ValueError(f"Unsupported language: {language}")

        self.language = language
        self.defaults = LOCALIZED_DEFAULTS[language]
        self.fallback_name = fallback_name
        self.markup_parser = MarkupRecipeParser()
        self.jsonld_parser = JSONLDRecipeParser()
        _LOGGER.debug("Initialized RecipeNormalizer (language: %s)", language)

    def _load(self, markup: str | bytes | None, url: str | None) -> BeautifulSoup:
        if not isinstance(markup, (str, bytes)) or not markup.strip():
            raise ExtractionFailure("page markup is empty", url)

        try:
            return BeautifulSoup(markup, features="html.parser")
        except (ParserRejectedMarkup, TypeError, ValueError) as e:
            raise ExtractionFailure(f"page markup could not be parsed: {e}", url) from e

    def extract(self, soup: BeautifulSoup) -> PartialRecipe:
        """Run both parsers and overlay structured data on the heuristic result."""
        baseline = self.markup_parser.parse(soup)
        structured = self.jsonld_parser.parse(soup)
        return baseline.overlay(structured)

    def normalize(self, markup: str | bytes | None, url: str | None = None) -> RecipeDraft:
        """Normalize page markup into a RecipeDraft.

        Args:
            markup: Raw HTML of the recipe page
            url: Source URL, recorded on the draft and in error messages

        Returns:
            The normalized recipe draft

        Raises:
            ExtractionFailure: If the markup is empty or unparseable, or no
                recipe name could be resolved and no fallback is configured
        """
        soup = self._load(markup, url)
        merged = self.extract(soup)

        name = merged.name
        if not name:
            if not self.fallback_name:
                _LOGGER.warning("No recipe name found in markup from %s", url)
                raise ExtractionFailure("no recipe name found", url)
            name = self.fallback_name

        amount = self.defaults["amount"]
        draft = RecipeDraft(
            name=name,
            description=merged.description or "",
            category=merged.category or self.defaults["category"],
            cook_time=DEFAULT_COOK_TIME if merged.cook_time is None else merged.cook_time,
            servings=DEFAULT_SERVINGS,
            ingredients=tuple(Ingredient(name=line, amount=amount)
                              for line in merged.ingredients or ()),
            instructions=tuple(merged.instructions or ()),
            tags=(),
            source_url=url,
        )

        _LOGGER.info(
            "Normalized recipe '%s' with %d ingredients and %d steps",
            draft.name,
            len(draft.ingredients),
            len(draft.instructions),
        )
        return draft
