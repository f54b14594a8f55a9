"""Switch platform for Cecotec Mambo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.switch import SwitchEntity

from .const import DOMAIN
from .entity import MamboEntity

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import MamboDeviceCoordinator

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Mambo switch entities."""
    coordinators = hass.data[DOMAIN][entry.entry_id]["coordinators"]

    entities: list[SwitchEntity] = []
    for coordinator in coordinators.values():
        entities.append(MamboRecipeActiveSwitch(coordinator))
        entities.append(MamboEditRecipeSwitch(coordinator))
        entities.append(MamboRefreshTokenSwitch(coordinator))

    async_add_entities(entities)


class MamboRecipeActiveSwitch(MamboEntity, SwitchEntity):
    """Shows whether a recipe is running; turning it off stops the recipe."""

    _attr_icon = "mdi:stove"
    _attr_name = "Recipe Active"

    def __init__(self, coordinator: MamboDeviceCoordinator) -> None:
        """Initialize the switch."""
        super().__init__(coordinator, "recipe_active")

    @property
    def is_on(self) -> bool:
        """Return True while a recipe is running."""
        return self.coordinator.recipe_active

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Recipes are started from the recipe selector."""
        _LOGGER.debug(
            "Select a recipe to start cooking on %s", self.coordinator.device.name
        )

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Stop the running recipe."""
        await self.coordinator.async_stop_recipe()


class MamboMomentarySwitch(MamboEntity, SwitchEntity):
    """Switch that runs an action when turned on and then resets itself."""

    _attr_is_on = False

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Run the action and switch back off."""
        self._attr_is_on = True
        self.async_write_ha_state()
        try:
            await self._async_run()
        finally:
            self._attr_is_on = False
            self.async_write_ha_state()

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Nothing to do, the switch resets itself."""

    async def _async_run(self) -> None:
        raise NotImplementedError


class MamboEditRecipeSwitch(MamboMomentarySwitch):
    """Sends an edited copy of the running recipe."""

    _attr_icon = "mdi:file-edit"
    _attr_name = "Edit Recipe"

    def __init__(self, coordinator: MamboDeviceCoordinator) -> None:
        """Initialize the switch."""
        super().__init__(coordinator, "edit_recipe")

    async def _async_run(self) -> None:
        await self.coordinator.async_edit_current_recipe()


class MamboRefreshTokenSwitch(MamboMomentarySwitch):
    """Logs in again to obtain a fresh token."""

    _attr_icon = "mdi:key-change"
    _attr_name = "Refresh Token"

    def __init__(self, coordinator: MamboDeviceCoordinator) -> None:
        """Initialize the switch."""
        super().__init__(coordinator, "refresh_token")

    async def _async_run(self) -> None:
        await self.coordinator.async_refresh_token()
