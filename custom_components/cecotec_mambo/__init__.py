from __future__ import annotations

import logging

import httpx
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_EMAIL, CONF_PASSWORD, CONF_TOKEN, Platform
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.httpx_client import get_async_client

from . import api
from .const import CONF_RECIPES_PATH, DOMAIN, RECIPES_FILE
from .coordinator import MamboDeviceCoordinator
from .recipes import load_recipes
from .session import MamboSession

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [
    Platform.BINARY_SENSOR,
    Platform.CLIMATE,
    Platform.SELECT,
    Platform.SENSOR,
    Platform.SWITCH,
]


async def async_discover_devices(session: MamboSession) -> list[api.MamboDevice]:
    """Fetch the account's devices, returning none when that is not possible."""
    if not session.authenticated:
        _LOGGER.debug("No Mambo token, skipping device discovery")
        return []

    try:
        devices = await api.async_get_devices(session.client, session.token)
    except api.MamboApiAuthError as err:
        _LOGGER.warning("Authentication failed during discovery: %s", err)
        return []
    except api.MamboApiClientError as err:
        _LOGGER.error("API client error during discovery: %s", err)
        return []
    except httpx.RequestError as err:
        _LOGGER.error("Connection error during discovery: %s", err)
        return []

    _LOGGER.info("Discovered %d Mambo devices", len(devices))
    return devices


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Setting up Cecotec Mambo integration for entry %s", entry.entry_id)

    @callback
    def _persist_token(token: str) -> None:
        hass.config_entries.async_update_entry(
            entry, data={**entry.data, CONF_TOKEN: token}
        )
        _LOGGER.debug("Stored Mambo token for entry %s", entry.entry_id)

    session = MamboSession(
        get_async_client(hass),
        entry.data.get(CONF_EMAIL),
        entry.data.get(CONF_PASSWORD),
        token=entry.data.get(CONF_TOKEN),
        persist_token=_persist_token,
    )

    if not session.authenticated:
        _LOGGER.info("No token configured for entry %s, logging in", entry.entry_id)
        token = await session.async_login()
        if token:
            _persist_token(token)

    recipes_path = entry.data.get(CONF_RECIPES_PATH) or hass.config.path(RECIPES_FILE)
    recipes = await hass.async_add_executor_job(load_recipes, recipes_path)

    devices = await async_discover_devices(session)
    coordinators = {
        device.id: MamboDeviceCoordinator(hass, entry, session, device, recipes)
        for device in devices
    }

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {
        "session": session,
        "recipes": recipes,
        "coordinators": coordinators,
    }
    _LOGGER.debug(
        "Stored data for entry %s: %d devices, %d recipes",
        entry.entry_id,
        len(coordinators),
        len(recipes),
    )

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    _LOGGER.info(
        "Successfully setup Cecotec Mambo integration for entry %s", entry.entry_id
    )
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Unloading Cecotec Mambo integration for entry %s", entry.entry_id)

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        hass.data.get(DOMAIN, {}).pop(entry.entry_id, None)
        _LOGGER.debug("Cleaned up data for entry %s", entry.entry_id)
    else:
        _LOGGER.warning("Failed to unload some platforms for entry %s", entry.entry_id)

    return unload_ok
