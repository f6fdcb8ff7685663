"""Parsers package."""
from .duration import parse_duration
from .jsonld_parser import JSONLDRecipeParser
from .markup_parser import MarkupRecipeParser

__all__ = ["JSONLDRecipeParser", "MarkupRecipeParser", "parse_duration"]
