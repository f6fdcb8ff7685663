"""
Service Handlers.

This module contains the Home Assistant service handler functions for
importing recipes, scheduling meal plans, generating the shopping list
and reading back or deleting stored records.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import ServiceValidationError

from ..const import (
    CONF_DEFAULT_TODO_ENTITY,
    CONF_LANGUAGE,
    CONF_REQUEST_TIMEOUT,
    DATA_CATEGORY,
    DATA_CHECKED,
    DATA_DATE,
    DATA_END,
    DATA_ERROR,
    DATA_ITEM_ID,
    DATA_ITEMS,
    DATA_MAX_COOK_TIME,
    DATA_MEAL_PLAN_ID,
    DATA_MEAL_PLAN_IDS,
    DATA_MEAL_PLANS,
    DATA_MEAL_TYPE,
    DATA_QUERY,
    DATA_RECIPE,
    DATA_RECIPE_ID,
    DATA_RECIPES,
    DATA_SAVE,
    DATA_START,
    DATA_STORE,
    DATA_TODO_ENTITY,
    DATA_URL,
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT,
    DOMAIN,
    EVENT_IMPORT_FAILED,
    EVENT_RECIPE_IMPORTED,
    EVENT_SHOPPING_LIST_GENERATED,
)
from ..exceptions import MealPlannerError
from ..storage import MealPlannerStore
from .recipe_service import import_recipe
from .shopping_list import ShoppingListConsolidator
from .todo_formatter import format_items_for_todo

_LOGGER = logging.getLogger(__name__)


def get_entry_config(hass: HomeAssistant) -> dict[str, Any]:
    """Get configuration from the first available config entry.

    Raises:
        ServiceValidationError: If the integration has no config entry
    """
    if not hass.data.get(DOMAIN):
        _LOGGER.error("No configuration found for Meal Planner")
        raise ServiceValidationError("Meal Planner is not configured")

    # Services are shared across all entries
    entry_id = next(iter(hass.data[DOMAIN]))
    return hass.data[DOMAIN][entry_id]


def get_store(hass: HomeAssistant) -> MealPlannerStore:
    """Return the shared record store."""
    return hass.data[DATA_STORE]


async def handle_import_recipe(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the import recipe service call.

    Args:
        hass: Home Assistant instance
        call: Service call with url and optional save flag

    Returns:
        Dictionary with the draft (or saved recipe) data, or an error
    """
    url = call.data[DATA_URL]
    save = call.data.get(DATA_SAVE, False)
    config = get_entry_config(hass)

    language = config.get(CONF_LANGUAGE, DEFAULT_LANGUAGE)
    timeout = config.get(CONF_REQUEST_TIMEOUT, DEFAULT_TIMEOUT)

    _LOGGER.info("Importing recipe from %s", url)

    try:
        # Run import in executor (blocking I/O)
        draft = await hass.async_add_executor_job(import_recipe, url, language, timeout)
    except (MealPlannerError, ValueError) as e:
        error_msg = f"Error importing recipe: {str(e)}"
        _LOGGER.error("Recipe import failed for %s: %s", url, error_msg)
        hass.bus.async_fire(
            EVENT_IMPORT_FAILED,
            {
                DATA_URL: url,
                DATA_ERROR: error_msg,
            }
        )
        return {"error": error_msg}

    if save:
        recipe = get_store(hass).add_recipe(draft)
        recipe_data = recipe.model_dump(mode="json")
        _LOGGER.info("Saved imported recipe '%s' as %d", recipe.name, recipe.id)
    else:
        recipe_data = draft.model_dump(mode="json")

    hass.bus.async_fire(
        EVENT_RECIPE_IMPORTED,
        {
            DATA_URL: url,
            DATA_RECIPE: recipe_data,
        }
    )
    return recipe_data


async def handle_add_meal_plan(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the add meal plan service call.

    Raises:
        ServiceValidationError: If the referenced recipe does not exist
    """
    recipe_id = call.data[DATA_RECIPE_ID]
    store = get_store(hass)

    if store.get_recipe(recipe_id) is None:
        raise ServiceValidationError(f"Unknown recipe id: {recipe_id}")

    meal_plan = store.add_meal_plan(
        call.data[DATA_DATE], call.data[DATA_MEAL_TYPE], recipe_id)
    _LOGGER.info("Scheduled recipe %d for %s %s",
                 recipe_id, meal_plan.date, meal_plan.meal_type)
    return meal_plan.model_dump(mode="json")


async def handle_generate_shopping_list(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the generate shopping list service call.

    Rebuilds the shopping list and, if a todo entity is given or configured,
    adds every item to that todo list.

    Args:
        hass: Home Assistant instance
        call: Service call with meal_plan_ids and optional todo_entity

    Returns:
        Dictionary with the generated items and the todo push result
    """
    meal_plan_ids = call.data[DATA_MEAL_PLAN_IDS]
    config = get_entry_config(hass)
    todo_entity = call.data.get(DATA_TODO_ENTITY) or config.get(CONF_DEFAULT_TODO_ENTITY)

    consolidator = ShoppingListConsolidator(get_store(hass))
    items = await hass.async_add_executor_job(consolidator.generate, meal_plan_ids)
    item_data = [item.model_dump(mode="json") for item in items]

    hass.bus.async_fire(
        EVENT_SHOPPING_LIST_GENERATED,
        {
            DATA_MEAL_PLAN_IDS: list(meal_plan_ids),
            DATA_ITEMS: item_data,
        }
    )

    items_added = 0
    if todo_entity:
        todo_items = format_items_for_todo(items)
        _LOGGER.debug("Adding %d items to %s", len(todo_items), todo_entity)
        tasks = [
            hass.services.async_call(
                'todo',
                'add_item',
                {
                    'entity_id': todo_entity,
                    'item': item_text,
                },
                blocking=False,
            )
            for item_text in todo_items
        ]
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for item_text, result in zip(todo_items, results):
            if isinstance(result, Exception):
                _LOGGER.warning("Failed to add '%s' to %s: %s",
                                item_text, todo_entity, result)
            else:
                items_added += 1
        _LOGGER.info("Added %d items to %s", items_added, todo_entity)

    return {
        DATA_ITEMS: item_data,
        "todo_entity": todo_entity,
        "items_added": items_added,
    }


async def handle_check_item(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the check item service call.

    Raises:
        ServiceValidationError: If the item does not exist
    """
    item_id = call.data[DATA_ITEM_ID]
    item = get_store(hass).set_item_checked(item_id, call.data.get(DATA_CHECKED, True))
    if item is None:
        raise ServiceValidationError(f"Unknown shopping list item: {item_id}")
    return item.model_dump(mode="json")


async def handle_search_recipes(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the search recipes service call.

    Without any filter every saved recipe is returned.
    """
    recipes = get_store(hass).search_recipes(
        query=call.data.get(DATA_QUERY),
        category=call.data.get(DATA_CATEGORY),
        max_cook_time=call.data.get(DATA_MAX_COOK_TIME),
    )
    _LOGGER.debug("Recipe search matched %d recipe(s)", len(recipes))
    return {DATA_RECIPES: [recipe.model_dump(mode="json") for recipe in recipes]}


async def handle_delete_recipe(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the delete recipe service call.

    Meal plans referring to the recipe are kept; shopping list generation
    skips them.

    Raises:
        ServiceValidationError: If the recipe does not exist
    """
    recipe_id = call.data[DATA_RECIPE_ID]
    if not get_store(hass).delete_recipe(recipe_id):
        raise ServiceValidationError(f"Unknown recipe id: {recipe_id}")
    _LOGGER.info("Deleted recipe %d", recipe_id)
    return {DATA_RECIPE_ID: recipe_id}


async def handle_list_meal_plans(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the list meal plans service call.

    start and end are optional and inclusive.
    """
    meal_plans = get_store(hass).list_meal_plans(
        call.data.get(DATA_START), call.data.get(DATA_END))
    return {DATA_MEAL_PLANS: [plan.model_dump(mode="json") for plan in meal_plans]}


async def handle_delete_meal_plan(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Handle the delete meal plan service call.

    Raises:
        ServiceValidationError: If the meal plan does not exist
    """
    meal_plan_id = call.data[DATA_MEAL_PLAN_ID]
    if not get_store(hass).delete_meal_plan(meal_plan_id):
        raise ServiceValidationError(f"Unknown meal plan id: {meal_plan_id}")
    _LOGGER.info("Deleted meal plan %d", meal_plan_id)
    return {DATA_MEAL_PLAN_ID: meal_plan_id}


async def handle_get_shopping_list(hass: HomeAssistant, call: ServiceCall) -> dict[str, Any]:
    """Return the current shopping list."""
    items = get_store(hass).list_shopping_items()
    return {DATA_ITEMS: [item.model_dump(mode="json") for item in items]}
