"""Base entity for Cecotec Mambo."""

from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import MamboDeviceCoordinator


class MamboEntity(CoordinatorEntity[MamboDeviceCoordinator]):
    """Base entity for a Mambo device."""

    _attr_has_entity_name = True

    def __init__(self, coordinator: MamboDeviceCoordinator, key: str) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        self._device_id = coordinator.device.id
        self._attr_unique_id = f"{self._device_id}_{key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, self._device_id)},
            name=coordinator.device.name,
            manufacturer="Cecotec",
            model="Mambo",
        )
