"""Data models for Cecotec Mambo integration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .const import (
    DEFAULT_HUMIDITY,
    DEFAULT_PRESSURE,
    DEFAULT_TEMPERATURE,
    DEFAULT_WEIGHT,
)


@dataclass(frozen=True)
class MamboRecipe:
    """A recipe defined in the user's recipe file."""

    id: str | int
    name: str
    steps: list[dict[str, Any]] | None = None


@dataclass(slots=True)
class MamboStatus:
    """Point-in-time status reported by the Mambo cloud for one device."""

    active: bool = False
    finished: bool = False
    next_step: str | None = None
    temperature: float = DEFAULT_TEMPERATURE
    humidity: float = DEFAULT_HUMIDITY
    pressure: float = DEFAULT_PRESSURE
    weight: float = DEFAULT_WEIGHT
    current_recipe_id: str | int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MamboStatus:
        """Build a snapshot from a status response, defaulting falsy fields."""
        return cls(
            active=bool(data.get("active")),
            finished=bool(data.get("finished")),
            next_step=data.get("nextStep") or None,
            temperature=data.get("temp") or DEFAULT_TEMPERATURE,
            humidity=data.get("humidity") or DEFAULT_HUMIDITY,
            pressure=data.get("pressure") or DEFAULT_PRESSURE,
            weight=data.get("weight") or DEFAULT_WEIGHT,
            current_recipe_id=data.get("currentRecipeId"),
        )


@dataclass
class AccessoryState:
    """Cooking state remembered between polls to detect transitions."""

    cooking_active: bool = False
    last_next_step: str | None = None
