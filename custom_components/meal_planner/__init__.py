"""
Meal Planner Integration for Home Assistant.

This integration imports recipes from recipe websites, schedules them as
meal plans and consolidates their ingredients into a shopping list.
"""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, ServiceCall, SupportsResponse
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.typing import ConfigType

from .const import (
    DOMAIN,
    CONF_LANGUAGE,
    CONF_DEFAULT_TODO_ENTITY,
    CONF_REQUEST_TIMEOUT,
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT,
    MEAL_TYPES,
    SERVICE_IMPORT_RECIPE,
    SERVICE_ADD_MEAL_PLAN,
    SERVICE_GENERATE_SHOPPING_LIST,
    SERVICE_CHECK_ITEM,
    SERVICE_SEARCH_RECIPES,
    SERVICE_DELETE_RECIPE,
    SERVICE_LIST_MEAL_PLANS,
    SERVICE_DELETE_MEAL_PLAN,
    SERVICE_GET_SHOPPING_LIST,
    DATA_URL,
    DATA_SAVE,
    DATA_DATE,
    DATA_MEAL_TYPE,
    DATA_RECIPE_ID,
    DATA_MEAL_PLAN_IDS,
    DATA_ITEM_ID,
    DATA_CHECKED,
    DATA_STORE,
    DATA_TODO_ENTITY,
    DATA_QUERY,
    DATA_CATEGORY,
    DATA_MAX_COOK_TIME,
    DATA_START,
    DATA_END,
    DATA_MEAL_PLAN_ID,
)
from .services.service_handlers import (
    handle_import_recipe,
    handle_add_meal_plan,
    handle_generate_shopping_list,
    handle_check_item,
    handle_search_recipes,
    handle_delete_recipe,
    handle_list_meal_plans,
    handle_delete_meal_plan,
    handle_get_shopping_list,
)
from .storage import MealPlannerStore

_LOGGER = logging.getLogger(__name__)

# Config flow only - no YAML support
CONFIG_SCHEMA = cv.empty_config_schema(DOMAIN)

# Service schemas
SERVICE_IMPORT_RECIPE_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_URL): cv.url,
        vol.Optional(DATA_SAVE, default=False): cv.boolean,
    }
)

SERVICE_ADD_MEAL_PLAN_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_DATE): cv.date,
        vol.Required(DATA_MEAL_TYPE): vol.In(MEAL_TYPES),
        vol.Required(DATA_RECIPE_ID): cv.positive_int,
    }
)

SERVICE_GENERATE_SHOPPING_LIST_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_MEAL_PLAN_IDS): vol.All(cv.ensure_list, [cv.positive_int]),
        vol.Optional(DATA_TODO_ENTITY): cv.entity_id,
    }
)

SERVICE_CHECK_ITEM_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_ITEM_ID): cv.positive_int,
        vol.Optional(DATA_CHECKED, default=True): cv.boolean,
    }
)

SERVICE_SEARCH_RECIPES_SCHEMA = vol.Schema(
    {
        vol.Optional(DATA_QUERY): cv.string,
        vol.Optional(DATA_CATEGORY): cv.string,
        vol.Optional(DATA_MAX_COOK_TIME): cv.positive_int,
    }
)

SERVICE_DELETE_RECIPE_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_RECIPE_ID): cv.positive_int,
    }
)

SERVICE_LIST_MEAL_PLANS_SCHEMA = vol.Schema(
    {
        vol.Optional(DATA_START): cv.date,
        vol.Optional(DATA_END): cv.date,
    }
)

SERVICE_DELETE_MEAL_PLAN_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_MEAL_PLAN_ID): cv.positive_int,
    }
)

SERVICE_GET_SHOPPING_LIST_SCHEMA = vol.Schema({})

SERVICES = {
    SERVICE_IMPORT_RECIPE: (handle_import_recipe, SERVICE_IMPORT_RECIPE_SCHEMA),
    SERVICE_ADD_MEAL_PLAN: (handle_add_meal_plan, SERVICE_ADD_MEAL_PLAN_SCHEMA),
    SERVICE_GENERATE_SHOPPING_LIST: (
        handle_generate_shopping_list, SERVICE_GENERATE_SHOPPING_LIST_SCHEMA),
    SERVICE_CHECK_ITEM: (handle_check_item, SERVICE_CHECK_ITEM_SCHEMA),
    SERVICE_SEARCH_RECIPES: (handle_search_recipes, SERVICE_SEARCH_RECIPES_SCHEMA),
    SERVICE_DELETE_RECIPE: (handle_delete_recipe, SERVICE_DELETE_RECIPE_SCHEMA),
    SERVICE_LIST_MEAL_PLANS: (handle_list_meal_plans, SERVICE_LIST_MEAL_PLANS_SCHEMA),
    SERVICE_DELETE_MEAL_PLAN: (handle_delete_meal_plan, SERVICE_DELETE_MEAL_PLAN_SCHEMA),
    SERVICE_GET_SHOPPING_LIST: (handle_get_shopping_list, SERVICE_GET_SHOPPING_LIST_SCHEMA),
}


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Set up the Meal Planner integration."""
    hass.data.setdefault(DOMAIN, {})
    hass.data.setdefault(DATA_STORE, MealPlannerStore())
    _LOGGER.debug("Meal Planner integration setup complete")
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Meal Planner from a config entry."""
    _LOGGER.info("Setting up Meal Planner config entry")

    hass.data.setdefault(DOMAIN, {})
    hass.data.setdefault(DATA_STORE, MealPlannerStore())

    hass.data[DOMAIN][entry.entry_id] = {
        CONF_LANGUAGE: entry.options.get(CONF_LANGUAGE, DEFAULT_LANGUAGE),
        CONF_DEFAULT_TODO_ENTITY: entry.options.get(CONF_DEFAULT_TODO_ENTITY),
        CONF_REQUEST_TIMEOUT: entry.options.get(CONF_REQUEST_TIMEOUT, DEFAULT_TIMEOUT),
    }

    # Set up services only once (for the first entry)
    if len(hass.data[DOMAIN]) == 1:
        _setup_services(hass)
        _LOGGER.info("Meal Planner services registered")

    # Listen for options updates
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))

    _LOGGER.debug("Meal Planner config entry setup complete")
    return True


async def async_reload_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload the config entry when options change."""
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    _LOGGER.info("Unloading Meal Planner config entry")

    hass.data[DOMAIN].pop(entry.entry_id, None)

    # Remove services only if this is the last entry
    if not hass.data[DOMAIN]:
        for service in SERVICES:
            hass.services.async_remove(DOMAIN, service)
        _LOGGER.info("Meal Planner services unregistered")

    return True


def _setup_services(hass: HomeAssistant) -> None:
    """Set up the integration services."""

    def _bind(handler):
        async def _handle(call: ServiceCall) -> dict[str, Any]:
            """Wrapper that injects hass into the handler."""
            return await handler(hass, call)
        return _handle

    for service, (handler, schema) in SERVICES.items():
        hass.services.async_register(
            DOMAIN,
            service,
            _bind(handler),
            schema=schema,
            supports_response=SupportsResponse.OPTIONAL,
        )
