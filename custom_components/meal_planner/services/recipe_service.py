"""
Recipe Import Service.

This module orchestrates importing a recipe from a URL: the page is fetched
once and its markup handed to the RecipeNormalizer.
"""
from __future__ import annotations

import logging

from ..const import DEFAULT_LANGUAGE, DEFAULT_TIMEOUT
from ..exceptions import ExtractionFailure
from ..extractors.recipe_normalizer import RecipeNormalizer
from ..extractors.scraper import fetch_recipe_html
from ..models.recipe import RecipeDraft

_LOGGER = logging.getLogger(__name__)


def import_recipe(
    url: str,
    language: str = DEFAULT_LANGUAGE,
    timeout: float = DEFAULT_TIMEOUT,
) -> RecipeDraft:
    """Fetch a recipe page and normalize it into a RecipeDraft.

    Args:
        url: Recipe website URL
        language: Selects the default placeholder texts
        timeout: Request timeout in seconds

    Returns:
        The normalized draft; nothing is persisted

    Raises:
        ValueError: If the URL is invalid
        MarkupUnavailable: If the page could not be fetched
        ExtractionFailure: If no recipe could be extracted from the page
    """
    _LOGGER.debug("Starting recipe import from %s", url)

    html = fetch_recipe_html(url, timeout=timeout)
    normalizer = RecipeNormalizer(language=language)

    try:
        draft = normalizer.normalize(html, url=url)
    except ExtractionFailure:
        _LOGGER.warning("Recipe extraction returned no results for %s", url)
        raise

    _LOGGER.info("Imported recipe '%s' from %s", draft.name, url)
    return draft
