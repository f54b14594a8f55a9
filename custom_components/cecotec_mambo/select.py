"""Select platform for Cecotec Mambo."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from homeassistant.components.select import SelectEntity

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
    """Set up Mambo select entities."""
    coordinators = hass.data[DOMAIN][entry.entry_id]["coordinators"]

    async_add_entities(
        MamboRecipeSelect(coordinator) for coordinator in coordinators.values()
    )


class MamboRecipeSelect(MamboEntity, SelectEntity):
    """Select entity listing the configured recipes in file order."""

    _attr_icon = "mdi:book-open-variant"
    _attr_name = "Recipe"

    def __init__(self, coordinator: MamboDeviceCoordinator) -> None:
        """Initialize the select entity."""
        super().__init__(coordinator, "recipe")
        self._attr_options = _option_labels(
            [recipe.name for recipe in coordinator.recipes]
        )
        self._option_index = {
            option: index for index, option in enumerate(self._attr_options)
        }

    @property
    def current_option(self) -> str | None:
        """Return the recipe selected or reported as running."""
        index = self.coordinator.recipe_index
        if index is None or not 0 <= index < len(self._attr_options):
            return None
        return self._attr_options[index]

    async def async_select_option(self, option: str) -> None:
        """Start the selected recipe."""
        index = self._option_index.get(option)
        if index is None:
            _LOGGER.debug("Unknown recipe option %s", option)
            return
        await self.coordinator.async_select_recipe(index)


def _option_labels(names: list[str]) -> list[str]:
    """Label recipes by name, numbering repeated names by position."""
    counts = Counter(names)
    return [
        f"{name} ({index + 1})" if counts[name] > 1 else name
        for index, name in enumerate(names)
    ]
