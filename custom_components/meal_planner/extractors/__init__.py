"""Extractors package."""
from .recipe_normalizer import RecipeNormalizer
from .scraper import fetch_recipe_html

__all__ = ["RecipeNormalizer", "fetch_recipe_html"]
