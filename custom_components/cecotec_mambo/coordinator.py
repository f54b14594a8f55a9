"""Coordinator for Cecotec Mambo integration."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from functools import partial
from typing import TYPE_CHECKING, Any

import httpx
from homeassistant.core import CALLBACK_TYPE, callback
from homeassistant.helpers.event import async_call_later
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from . import api
from .const import (
    DEFAULT_POLL_INTERVAL,
    DOMAIN,
    EVENT_MAMBO,
    EVENT_TYPE_FINISHED,
    EVENT_TYPE_STARTED,
    EVENT_TYPE_STEP,
    KEEP_WARM_TEMPERATURE,
    PULSE_DURATION,
    PULSE_FINISHED,
    PULSE_STARTED,
    PULSE_STEP,
)
from .models import AccessoryState, MamboRecipe, MamboStatus
from .recipes import build_edited_recipe, find_recipe_index

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

    from .session import MamboSession

_LOGGER = logging.getLogger(__name__)


class MamboDeviceCoordinator(DataUpdateCoordinator[MamboStatus]):
    """Poll one Mambo device and translate its status into cook events.

    Besides the latest status snapshot, the coordinator keeps the state the
    entities of the device share: pulse flags, the recipe-active flag, the
    selected recipe index and the requested target temperature.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        session: MamboSession,
        device: api.MamboDevice,
        recipes: list[MamboRecipe],
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=f"{DOMAIN}_{device.id}",
            update_interval=timedelta(seconds=DEFAULT_POLL_INTERVAL),
        )
        self.session = session
        self.device = device
        self.recipes = recipes
        self.state = AccessoryState()
        self.pulses: dict[str, bool] = {
            PULSE_STEP: False,
            PULSE_FINISHED: False,
            PULSE_STARTED: False,
        }
        self._pulse_unsubs: dict[str, CALLBACK_TYPE] = {}
        config_entry.async_on_unload(self._async_cancel_pulses)
        self.recipe_active = False
        self.recipe_index: int | None = None
        self.target_temperature: float | None = None
        self.data = MamboStatus()

    async def _async_update_data(self) -> MamboStatus:
        if not self.session.authenticated:
            _LOGGER.debug("No Mambo token, skipping poll for %s", self.device.name)
            return self.data

        status = await self.async_fetch_status()
        self._process_status(status)
        return status

    async def async_fetch_status(self) -> MamboStatus:
        """Fetch a status snapshot, falling back to defaults on any failure."""
        if not self.session.authenticated:
            return MamboStatus()

        try:
            return await api.async_get_status(
                self.session.client, self.session.token, self.device.id
            )
        except api.MamboApiClientError as err:
            _LOGGER.warning("Status request failed for %s: %s", self.device.name, err)
        except httpx.RequestError as err:
            _LOGGER.warning(
                "Connection error while polling %s: %s", self.device.name, err
            )
        return MamboStatus()

    def _process_status(self, status: MamboStatus) -> None:
        """Detect step, finish and start transitions against the previous poll."""
        was_active = self.state.cooking_active
        self.state.cooking_active = status.active

        new_step = bool(status.next_step) and (
            status.next_step != self.state.last_next_step
        )
        self.state.last_next_step = status.next_step

        if new_step:
            self._notify(
                EVENT_TYPE_STEP, f"{self.device.name}: Add step: {status.next_step}"
            )
            self._async_pulse(PULSE_STEP)

        if status.finished and was_active:
            self._notify(EVENT_TYPE_FINISHED, f"{self.device.name}: Cooking finished")
            self.recipe_active = False
            self._async_pulse(PULSE_FINISHED)

        if not was_active and status.active:
            self._notify(EVENT_TYPE_STARTED, f"{self.device.name}: Cooking started")
            self._async_pulse(PULSE_STARTED)

        index = find_recipe_index(self.recipes, status.current_recipe_id)
        if index is not None:
            self.recipe_index = index

    def _notify(self, event_type: str, message: str) -> None:
        _LOGGER.info("Notification: %s", message)
        self.hass.bus.async_fire(
            EVENT_MAMBO,
            {"device_id": self.device.id, "type": event_type, "message": message},
        )

    @callback
    def _async_pulse(self, key: str) -> None:
        """Raise a pulse flag, restarting its revert timer if already raised."""
        if unsub := self._pulse_unsubs.pop(key, None):
            unsub()
        self.pulses[key] = True
        self._pulse_unsubs[key] = async_call_later(
            self.hass, PULSE_DURATION, partial(self._async_end_pulse, key)
        )

    @callback
    def _async_end_pulse(self, key: str, _now: datetime) -> None:
        self._pulse_unsubs.pop(key, None)
        self.pulses[key] = False
        self.async_update_listeners()

    @callback
    def _async_cancel_pulses(self) -> None:
        for unsub in self._pulse_unsubs.values():
            unsub()
        self._pulse_unsubs.clear()

    async def _async_command(
        self,
        command: Callable[..., Awaitable[Any]],
        *args: Any,
    ) -> bool:
        """Send a command for this device, returning False if it failed."""
        if not self.session.authenticated:
            _LOGGER.debug("No Mambo token, dropping command for %s", self.device.name)
            return False

        try:
            await command(
                self.session.client, self.session.token, self.device.id, *args
            )
        except api.MamboApiClientError as err:
            _LOGGER.error("Command failed for %s: %s", self.device.name, err)
            return False
        except httpx.RequestError as err:
            _LOGGER.error(
                "Connection error while sending command to %s: %s",
                self.device.name,
                err,
            )
            return False
        return True

    async def _async_create_recipe(self, recipe: MamboRecipe) -> str | int | None:
        if not self.session.authenticated:
            return None

        try:
            return await api.async_create_recipe(
                self.session.client,
                self.session.token,
                self.device.id,
                recipe.name,
                recipe.steps,
            )
        except (api.MamboApiClientError, httpx.RequestError) as err:
            _LOGGER.error(
                "Failed to create recipe %s on %s: %s",
                recipe.name,
                self.device.name,
                err,
            )
            return None

    async def async_select_recipe(self, index: int) -> None:
        """Start the configured recipe at the given position.

        Recipes with inline steps are created on the device first and the
        returned id is started. Unknown positions are ignored.
        """
        if not 0 <= index < len(self.recipes):
            _LOGGER.debug("No recipe at index %s for %s", index, self.device.name)
            return

        recipe = self.recipes[index]
        if recipe.steps:
            recipe_id = await self._async_create_recipe(recipe)
        else:
            recipe_id = recipe.id

        if recipe_id is None:
            return

        if not await self._async_command(api.async_start_recipe, recipe_id):
            return

        _LOGGER.info("%s: Starting %s", self.device.name, recipe.name)
        self.recipe_index = index
        self.recipe_active = True
        self.async_update_listeners()

    async def async_edit_current_recipe(self) -> None:
        """Send an edited copy of the recipe the device is currently running."""
        status = await self.async_fetch_status()
        recipe = next(
            (r for r in self.recipes if r.id == status.current_recipe_id), None
        )
        if recipe is None:
            _LOGGER.debug("No configured recipe is running on %s", self.device.name)
            return

        updates = build_edited_recipe(recipe)
        if await self._async_command(api.async_edit_recipe, recipe.id, updates):
            _LOGGER.info("%s: Recipe edited", self.device.name)

    async def async_stop_recipe(self) -> None:
        """Stop the running recipe."""
        self.recipe_active = False
        self.async_update_listeners()
        if await self._async_command(api.async_stop_recipe):
            _LOGGER.info("%s: Stopping recipe", self.device.name)

    async def async_set_target_temperature(self, temperature: float) -> None:
        """Record the target temperature, enabling keep warm at 60 degrees."""
        self.target_temperature = temperature
        self.async_update_listeners()
        if temperature != KEEP_WARM_TEMPERATURE:
            return

        if await self._async_command(api.async_keep_warm):
            _LOGGER.info("%s: Keep warm enabled", self.device.name)

    async def async_refresh_token(self) -> bool:
        """Log in again and persist the new token."""
        return await self.session.async_refresh_token()
