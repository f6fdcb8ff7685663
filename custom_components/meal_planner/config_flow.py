"""Config flow for Meal Planner integration."""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import callback
from homeassistant.data_entry_flow import FlowResult
from homeassistant.helpers import selector

from .const import (
    DOMAIN,
    AVAILABLE_LANGUAGES,
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT,
    CONF_LANGUAGE,
    CONF_DEFAULT_TODO_ENTITY,
    CONF_REQUEST_TIMEOUT,
)

_LOGGER = logging.getLogger(__name__)


def _clean_options(user_input: dict[str, Any]) -> dict[str, Any]:
    """Normalize empty todo entity strings to None."""
    if CONF_DEFAULT_TODO_ENTITY in user_input:
        if not (user_input[CONF_DEFAULT_TODO_ENTITY] or "").strip():
            user_input[CONF_DEFAULT_TODO_ENTITY] = None
    return user_input


def _options_schema(
    language: str,
    todo_entity: str | None,
    timeout: int,
) -> vol.Schema:
    """Build the shared options form."""
    schema_dict = {
        vol.Optional(
            CONF_LANGUAGE,
            default=language,
        ): selector.SelectSelector(
            selector.SelectSelectorConfig(
                options=AVAILABLE_LANGUAGES,
                mode=selector.SelectSelectorMode.DROPDOWN,
            ),
        ),
    }

    # Only add default for todo_entity if it has a value
    if todo_entity:
        todo_key = vol.Optional(CONF_DEFAULT_TODO_ENTITY, default=todo_entity)
    else:
        todo_key = vol.Optional(CONF_DEFAULT_TODO_ENTITY)
    schema_dict[todo_key] = selector.EntitySelector(
        selector.EntitySelectorConfig(
            domain="todo",
        ),
    )

    schema_dict[vol.Optional(
        CONF_REQUEST_TIMEOUT,
        default=timeout,
    )] = selector.NumberSelector(
        selector.NumberSelectorConfig(
            min=5,
            max=120,
            step=1,
            unit_of_measurement="s",
            mode=selector.NumberSelectorMode.BOX,
        ),
    )

    return vol.Schema(schema_dict)


class MealPlannerConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Meal Planner."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle the initial step."""
        # Check if already configured
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()

        if user_input is not None:
            _LOGGER.info("Creating Meal Planner config entry")
            return self.async_create_entry(
                title="Meal Planner",
                data={},
                options=_clean_options(user_input),
            )

        return self.async_show_form(
            step_id="user",
            data_schema=_options_schema(DEFAULT_LANGUAGE, None, DEFAULT_TIMEOUT),
        )

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> MealPlannerOptionsFlow:
        """Get the options flow for this handler."""
        return MealPlannerOptionsFlow()


class MealPlannerOptionsFlow(config_entries.OptionsFlow):
    """Handle options flow for Meal Planner."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Manage the options."""
        if user_input is not None:
            _LOGGER.info("Updating Meal Planner options")
            return self.async_create_entry(title="", data=_clean_options(user_input))

        options = self.config_entry.options
        return self.async_show_form(
            step_id="init",
            data_schema=_options_schema(
                options.get(CONF_LANGUAGE, DEFAULT_LANGUAGE),
                options.get(CONF_DEFAULT_TODO_ENTITY),
                options.get(CONF_REQUEST_TIMEOUT, DEFAULT_TIMEOUT),
            ),
        )
