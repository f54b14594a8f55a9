"""Binary sensor platform for Cecotec Mambo.

Each sensor pulses on for a few seconds when the matching cook event is
detected by the coordinator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from homeassistant.components.binary_sensor import (
    BinarySensorEntity,
    BinarySensorEntityDescription,
)

from .const import DOMAIN, PULSE_FINISHED, PULSE_STARTED, PULSE_STEP
from .entity import MamboEntity

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import MamboDeviceCoordinator


@dataclass(frozen=True)
class MamboBinarySensorEntityDescription(BinarySensorEntityDescription):
    """Describes a Mambo pulse sensor."""

    pulse: str = ""


BINARY_SENSORS: tuple[MamboBinarySensorEntityDescription, ...] = (
    MamboBinarySensorEntityDescription(
        key="cooking_finished",
        name="Cooking Finished",
        icon="mdi:pot-steam",
        pulse=PULSE_FINISHED,
    ),
    MamboBinarySensorEntityDescription(
        key="cooking_started",
        name="Cooking Started",
        icon="mdi:pot-mix",
        pulse=PULSE_STARTED,
    ),
    MamboBinarySensorEntityDescription(
        key="next_step",
        name="Next Step",
        icon="mdi:chef-hat",
        pulse=PULSE_STEP,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Mambo binary sensor entities."""
    coordinators = hass.data[DOMAIN][entry.entry_id]["coordinators"]

    async_add_entities(
        MamboPulseBinarySensor(coordinator, description)
        for coordinator in coordinators.values()
        for description in BINARY_SENSORS
    )


class MamboPulseBinarySensor(MamboEntity, BinarySensorEntity):
    """Binary sensor that reflects a short-lived cook event."""

    entity_description: MamboBinarySensorEntityDescription

    def __init__(
        self,
        coordinator: MamboDeviceCoordinator,
        description: MamboBinarySensorEntityDescription,
    ) -> None:
        """Initialize the binary sensor."""
        super().__init__(coordinator, description.key)
        self.entity_description = description

    @property
    def is_on(self) -> bool:
        """Return true while the event pulse is active."""
        return self.coordinator.pulses.get(self.entity_description.pulse, False)
