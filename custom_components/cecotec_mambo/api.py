"""API client for the Cecotec Mambo cloud.

This module provides functions to interact with the Mambo cloud API,
including authentication, device discovery, status polling and recipe
commands.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from .const import BASE_URL
from .models import MamboStatus

_LOGGER = logging.getLogger(__name__)

# HTTP status codes
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403


class MamboApiClientError(Exception):
    """Base exception for Mambo API client errors."""


class MamboApiAuthError(MamboApiClientError):
    """Exception raised for authentication errors."""


@dataclass(frozen=True)
class MamboDevice:
    """Represents a Mambo cooking appliance registered to the account.

    Attributes:
        id: Unique device identifier.
        name: Human-readable device name.

    """

    id: str
    name: str


def create_headers(token: str | None = None) -> dict[str, str]:
    """Create HTTP headers for Mambo API requests.

    Args:
        token: Optional bearer token to include in headers.

    Returns:
        Dictionary containing HTTP headers for API requests.

    """
    headers = {
        "content-type": "application/json",
        "accept": "application/json",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def is_http_error(status: int) -> bool:
    """Check if HTTP status code indicates an error."""
    return status >= HTTP_BAD_REQUEST


def is_auth_error(status: int) -> bool:
    """Check if HTTP status code indicates an authentication error."""
    return status in (HTTP_UNAUTHORIZED, HTTP_FORBIDDEN)


def validate_response(response: httpx.Response) -> dict[str, Any]:
    """Validate HTTP response and return parsed JSON data.

    Args:
        response: HTTP response object to validate.

    Returns:
        Parsed JSON data from response, or an empty dict for an empty body.

    Raises:
        MamboApiAuthError: If authentication error is detected.
        MamboApiClientError: If the request failed or the body is not JSON.

    """
    if is_http_error(response.status_code):
        if is_auth_error(response.status_code):
            auth_error = "Authentication error"
            raise MamboApiAuthError(auth_error)
        client_error = f"Request failed: {response.status_code}"
        raise MamboApiClientError(client_error)

    if not response.content:
        return {}

    try:
        data = response.json()
    except ValueError as err:
        error_msg = f"Invalid JSON response: {err}"
        raise MamboApiClientError(error_msg) from err

    if not isinstance(data, dict):
        error_msg = "Unexpected response payload"
        raise MamboApiClientError(error_msg)
    return data


def extract_token(data: dict[str, Any]) -> str:
    """Extract the bearer token from a login response.

    Raises:
        MamboApiAuthError: If the response carries no token.

    """
    token = data.get("token")
    if not token:
        error_msg = "Login response did not contain a token"
        raise MamboApiAuthError(error_msg)
    return token


def extract_devices(data: dict[str, Any]) -> list[MamboDevice]:
    """Extract device list from API response.

    Args:
        data: API response data dictionary.

    Returns:
        List of MamboDevice objects.

    Raises:
        MamboApiClientError: If the list or one of its records is malformed.

    """
    devices_data = data.get("devices") or []
    if not isinstance(devices_data, list):
        error_msg = "Unexpected devices payload"
        raise MamboApiClientError(error_msg)

    devices = []
    for device in devices_data:
        if not isinstance(device, dict) or device.get("id") is None:
            error_msg = f"Malformed device record: {device!r}"
            raise MamboApiClientError(error_msg)
        device_id = str(device["id"])
        devices.append(MamboDevice(id=device_id, name=device.get("name") or device_id))
    return devices


async def _async_post(
    session: httpx.AsyncClient,
    token: str,
    path: str,
    payload: dict[str, Any],
) -> dict[str, Any]:
    response = await session.post(
        f"{BASE_URL}{path}",
        headers=create_headers(token),
        json=payload,
    )
    return validate_response(response)


async def async_login(
    session: httpx.AsyncClient,
    email: str,
    password: str,
) -> str:
    """Authenticate with the Mambo cloud using email and password.

    Args:
        session: HTTP client session.
        email: User email address.
        password: User password.

    Returns:
        The bearer token issued by the cloud.

    Raises:
        MamboApiAuthError: If authentication fails.
        MamboApiClientError: If API request fails.

    """
    url = f"{BASE_URL}/auth/login"
    payload = {"email": email, "password": password}

    _LOGGER.debug("Authenticating with Mambo API")
    response = await session.post(url, headers=create_headers(), json=payload)
    data = validate_response(response)
    token = extract_token(data)
    _LOGGER.debug("Successfully authenticated with Mambo API")
    return token


async def async_get_devices(
    session: httpx.AsyncClient,
    token: str,
) -> list[MamboDevice]:
    """Fetch the devices registered to the account.

    Raises:
        MamboApiAuthError: If authentication fails.
        MamboApiClientError: If API request fails.

    """
    url = f"{BASE_URL}/devices"

    _LOGGER.debug("Fetching devices from Mambo API")
    response = await session.get(url, headers=create_headers(token))
    data = validate_response(response)
    devices = extract_devices(data)
    _LOGGER.debug("Retrieved %d devices from Mambo API", len(devices))
    return devices


async def async_get_status(
    session: httpx.AsyncClient,
    token: str,
    device_id: str,
) -> MamboStatus:
    """Fetch the current status snapshot of a device."""
    _LOGGER.debug("Fetching status for device %s", device_id)
    data = await _async_post(session, token, "/mambo/status", {"deviceId": device_id})
    return MamboStatus.from_dict(data)


async def async_create_recipe(
    session: httpx.AsyncClient,
    token: str,
    device_id: str,
    name: str,
    steps: list[dict[str, Any]],
) -> str | int | None:
    """Create a custom recipe on the device and return its identifier."""
    _LOGGER.debug("Creating recipe %s on device %s", name, device_id)
    data = await _async_post(
        session,
        token,
        "/mambo/createRecipe",
        {"deviceId": device_id, "name": name, "steps": steps},
    )
    return data.get("recipeId")


async def async_edit_recipe(
    session: httpx.AsyncClient,
    token: str,
    device_id: str,
    recipe_id: str | int,
    updates: dict[str, Any],
) -> None:
    """Apply updates to an existing recipe on the device."""
    _LOGGER.debug("Editing recipe %s on device %s", recipe_id, device_id)
    await _async_post(
        session,
        token,
        "/mambo/editRecipe",
        {"deviceId": device_id, "recipeId": recipe_id, **updates},
    )


async def async_start_recipe(
    session: httpx.AsyncClient,
    token: str,
    device_id: str,
    recipe_id: str | int,
) -> None:
    """Start a recipe on the device."""
    _LOGGER.debug("Starting recipe %s on device %s", recipe_id, device_id)
    await _async_post(
        session,
        token,
        "/mambo/startRecipe",
        {"deviceId": device_id, "recipeId": recipe_id},
    )


async def async_stop_recipe(
    session: httpx.AsyncClient,
    token: str,
    device_id: str,
) -> None:
    """Stop whatever recipe the device is running."""
    _LOGGER.debug("Stopping recipe on device %s", device_id)
    await _async_post(session, token, "/mambo/stopRecipe", {"deviceId": device_id})


async def async_keep_warm(
    session: httpx.AsyncClient,
    token: str,
    device_id: str,
) -> None:
    """Switch the device to keep-warm mode."""
    _LOGGER.debug("Enabling keep warm on device %s", device_id)
    await _async_post(session, token, "/mambo/keepwarm", {"deviceId": device_id})
