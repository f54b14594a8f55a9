"""Recipe definitions loaded from the user's recipe file.

The file is a YAML list, for example::

    - id: 101
      name: Lentejas
    - id: custom-risotto
      name: Risotto
      steps:
        - time: 10
          temperature: 100
        - time: 18
          temperature: 90
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from .const import EDITED_RECIPE_NAME, EDITED_STEP_TIME
from .models import MamboRecipe

_LOGGER = logging.getLogger(__name__)

STEP_SCHEMA = vol.Schema(
    {vol.Required("time"): vol.Any(int, float)},
    extra=vol.ALLOW_EXTRA,
)

RECIPE_SCHEMA = vol.Schema(
    {
        vol.Required("id"): vol.Any(str, int),
        vol.Required("name"): str,
        vol.Optional("steps"): [STEP_SCHEMA],
    }
)

RECIPES_SCHEMA = vol.Schema(vol.Any(None, [RECIPE_SCHEMA]))


def parse_recipes(raw: Any) -> list[MamboRecipe]:
    """Validate raw recipe data and convert it to MamboRecipe objects.

    Raises:
        vol.Invalid: If the data does not match the recipe schema.

    """
    validated = RECIPES_SCHEMA(raw) or []
    return [
        MamboRecipe(id=item["id"], name=item["name"], steps=item.get("steps"))
        for item in validated
    ]


def load_recipes(path: str | Path) -> list[MamboRecipe]:
    """Load recipes from a YAML file.

    Runs blocking file I/O, call it from an executor job. A missing or
    invalid file results in an empty recipe list.
    """
    try:
        with open(path, encoding="utf-8") as file:
            raw = yaml.safe_load(file)
    except FileNotFoundError:
        _LOGGER.debug("No recipe file found at %s", path)
        return []
    except (OSError, yaml.YAMLError) as err:
        _LOGGER.error("Failed to read recipe file %s: %s", path, err)
        return []

    try:
        recipes = parse_recipes(raw)
    except vol.Invalid as err:
        _LOGGER.error("Invalid recipe file %s: %s", path, err)
        return []

    _LOGGER.debug("Loaded %d recipes from %s", len(recipes), path)
    return recipes


def find_recipe_index(
    recipes: list[MamboRecipe], recipe_id: str | int | None
) -> int | None:
    """Return the position of the recipe with the given id, if configured."""
    if recipe_id is None:
        return None
    for index, recipe in enumerate(recipes):
        if recipe.id == recipe_id:
            return index
    return None


def build_edited_recipe(recipe: MamboRecipe) -> dict[str, Any]:
    """Build the update payload for the edit-recipe command.

    The first step keeps its other fields and gets its duration forced.
    """
    first_step = copy.deepcopy(recipe.steps[0]) if recipe.steps else {}
    return {
        "name": EDITED_RECIPE_NAME,
        "steps": [{**first_step, "time": EDITED_STEP_TIME}],
    }
