"""Exceptions raised by the Meal Planner pipelines."""
from __future__ import annotations


class MealPlannerError(Exception):
    """Base class for Meal Planner errors."""


class MarkupUnavailable(MealPlannerError):
    """The page markup could not be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ExtractionFailure(MealPlannerError):
    """Markup was available but no usable recipe could be extracted from it."""

    def __init__(self, reason: str, url: str | None = None) -> None:
        message = f"Recipe extraction failed: {reason}"
        if url:
            message = f"{message} ({url})"
        super().__init__(message)
        self.reason = reason
        self.url = url
