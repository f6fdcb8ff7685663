"""
Base Recipe Parser.

This module defines the base interface that all recipe parsers must implement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from ..models.recipe import PartialRecipe


class BaseRecipeParser(ABC):
    """Abstract base class for recipe parsers.

    All recipe parsers must implement the parse method to turn parsed page
    markup into a PartialRecipe. Fields a parser cannot resolve stay None.
    """

    @abstractmethod
    def parse(self, soup: BeautifulSoup) -> PartialRecipe:
        """Extract recipe fields from parsed markup.

        Args:
            soup: The parsed page

        Returns:
            A PartialRecipe with every field the parser could resolve
        """
        pass
