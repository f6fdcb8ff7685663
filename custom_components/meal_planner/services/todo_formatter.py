"""Formatting of shopping list items for Home Assistant todo lists."""
from __future__ import annotations

import logging

from ..models.recipe import ShoppingListItem

_LOGGER = logging.getLogger(__name__)


def format_items_for_todo(items: list[ShoppingListItem]) -> list[str]:
    """Format shopping list items as todo item summaries.

    Args:
        items: Consolidated shopping list items

    Returns:
        One 'name amount' string per item with a usable name
    """
    todo_items = []

    for item in items:
        name = item.name.strip()
        if not name:
            _LOGGER.debug("Skipping item %d: empty name", item.id)
            continue

        amount = item.amount.strip()
        todo_items.append(f"{name} {amount}" if amount else name)

    return todo_items
