"""Pytest configuration and fixtures for Cecotec Mambo tests."""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from custom_components.cecotec_mambo.api import MamboDevice
from custom_components.cecotec_mambo.models import MamboRecipe

SAMPLE_TOKEN = "test_bearer_token"


@pytest.fixture
def sample_token() -> str:
    """Fixture providing a bearer token."""
    return SAMPLE_TOKEN


@pytest.fixture
def sample_login_response(sample_token: str) -> dict:
    """Fixture providing a sample login API response."""
    return {"token": sample_token}


@pytest.fixture
def sample_devices_response() -> dict:
    """Fixture providing a sample devices API response.

    Returns:
        A dictionary representing a devices API response with two robots.

    """
    return {
        "devices": [
            {"id": "device1", "name": "Kitchen Mambo"},
            {"id": "device2", "name": "Garage Mambo"},
        ],
    }


@pytest.fixture
def sample_status_response() -> dict:
    """Fixture providing a sample status API response."""
    return {
        "active": True,
        "finished": False,
        "nextStep": "Add salt",
        "temp": 95,
        "humidity": 40,
        "pressure": 1020,
        "weight": 850,
        "currentRecipeId": 101,
    }


@pytest.fixture
def sample_recipes() -> list[MamboRecipe]:
    """Fixture providing one built-in and one custom recipe."""
    return [
        MamboRecipe(id=101, name="Lentejas"),
        MamboRecipe(
            id="custom-risotto",
            name="Risotto",
            steps=[
                {"time": 10, "temperature": 100, "speed": 2},
                {"time": 18, "temperature": 90},
            ],
        ),
    ]


@pytest.fixture
def mock_device() -> MamboDevice:
    """Create a sample Mambo device."""
    return MamboDevice(id="device1", name="Kitchen Mambo")


@pytest.fixture
def mock_hass() -> Mock:
    """Create a mock Home Assistant instance."""
    hass = Mock()
    hass.data = {}
    hass.bus = Mock()
    hass.config_entries = Mock()
    hass.config_entries.async_update_entry = Mock()
    hass.config_entries.async_forward_entry_setups = AsyncMock()
    hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    return hass


@pytest.fixture
def mock_client() -> Mock:
    """Create a mock HTTP client."""
    return Mock(spec=httpx.AsyncClient)


@pytest.fixture
def mock_config_entry() -> Mock:
    """Create a mock config entry."""
    entry = Mock()
    entry.entry_id = "test_entry_id"
    entry.data = {
        "email": "test@example.com",
        "password": "password123",
        "token": SAMPLE_TOKEN,
        "recipes_path": "",
    }
    return entry
