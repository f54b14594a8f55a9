"""Sensor platform for Cecotec Mambo."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.const import (
    PERCENTAGE,
    UnitOfMass,
    UnitOfPressure,
    UnitOfTemperature,
)

from .const import DOMAIN
from .entity import MamboEntity
from .models import MamboStatus

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback
    from homeassistant.helpers.typing import StateType

    from .coordinator import MamboDeviceCoordinator


@dataclass(frozen=True)
class MamboSensorEntityDescription(SensorEntityDescription):
    """Describes a Mambo status sensor."""

    value_fn: Callable[[MamboStatus], StateType] = lambda status: None


SENSORS: tuple[MamboSensorEntityDescription, ...] = (
    MamboSensorEntityDescription(
        key="temperature",
        name="Temperature",
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        value_fn=lambda status: status.temperature,
    ),
    MamboSensorEntityDescription(
        key="humidity",
        name="Humidity",
        device_class=SensorDeviceClass.HUMIDITY,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=PERCENTAGE,
        value_fn=lambda status: status.humidity,
    ),
    MamboSensorEntityDescription(
        key="pressure",
        name="Pressure",
        device_class=SensorDeviceClass.PRESSURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfPressure.HPA,
        value_fn=lambda status: status.pressure,
    ),
    MamboSensorEntityDescription(
        key="weight",
        name="Weight",
        device_class=SensorDeviceClass.WEIGHT,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfMass.GRAMS,
        value_fn=lambda status: status.weight,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Mambo sensor entities."""
    coordinators = hass.data[DOMAIN][entry.entry_id]["coordinators"]

    async_add_entities(
        MamboSensor(coordinator, description)
        for coordinator in coordinators.values()
        for description in SENSORS
    )


class MamboSensor(MamboEntity, SensorEntity):
    """Sensor mirroring one field of the device status."""

    entity_description: MamboSensorEntityDescription

    def __init__(
        self,
        coordinator: MamboDeviceCoordinator,
        description: MamboSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, description.key)
        self.entity_description = description

    @property
    def native_value(self) -> StateType:
        """Return the state of the sensor."""
        return self.entity_description.value_fn(self.coordinator.data)
