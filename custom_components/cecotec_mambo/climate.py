"""Climate entity for Cecotec Mambo.

The thermostat mirrors the cooking temperature. Setting the target to the
keep-warm temperature switches the device to keep warm, other targets are
only remembered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.climate import (
    ClimateEntity,
    ClimateEntityFeature,
    HVACMode,
)
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature

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
    """Set up Mambo climate entities."""
    coordinators = hass.data[DOMAIN][entry.entry_id]["coordinators"]

    async_add_entities(
        MamboClimateEntity(coordinator) for coordinator in coordinators.values()
    )


class MamboClimateEntity(MamboEntity, ClimateEntity):
    """Thermostat surface of a Mambo device."""

    _attr_name = None
    _attr_temperature_unit = UnitOfTemperature.CELSIUS
    _attr_supported_features = (
        ClimateEntityFeature.TARGET_TEMPERATURE
        | ClimateEntityFeature.TURN_ON
        | ClimateEntityFeature.TURN_OFF
    )
    _attr_hvac_modes = [HVACMode.OFF, HVACMode.HEAT]
    _attr_min_temp = 0
    _attr_max_temp = 120
    _attr_target_temperature_step = 1

    def __init__(self, coordinator: MamboDeviceCoordinator) -> None:
        """Initialize the climate entity."""
        super().__init__(coordinator, "thermostat")

    @property
    def hvac_mode(self) -> HVACMode:
        """Return HEAT while the device is cooking."""
        if self.coordinator.state.cooking_active:
            return HVACMode.HEAT
        return HVACMode.OFF

    @property
    def current_temperature(self) -> float:
        """Return the measured cooking temperature."""
        return self.coordinator.data.temperature

    @property
    def target_temperature(self) -> float | None:
        """Return the last requested target temperature."""
        return self.coordinator.target_temperature

    async def async_set_temperature(self, **kwargs: Any) -> None:
        """Set new target temperature."""
        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return
        await self.coordinator.async_set_target_temperature(temperature)

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Stop the running recipe when switched off.

        Cooking is started from the recipe selector, so HEAT sends nothing.
        """
        if hvac_mode == HVACMode.OFF:
            await self.coordinator.async_stop_recipe()
            return
        _LOGGER.debug(
            "Select a recipe to start cooking on %s", self.coordinator.device.name
        )
