"""Tests for the Cecotec Mambo Config Flow."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest
from homeassistant.const import CONF_EMAIL, CONF_PASSWORD, CONF_TOKEN
from homeassistant.data_entry_flow import FlowResultType

from custom_components.cecotec_mambo import api
from custom_components.cecotec_mambo.config_flow import CecotecMamboConfigFlow
from custom_components.cecotec_mambo.const import (
    CONF_RECIPES_PATH,
    ERROR_CANNOT_CONNECT,
    ERROR_INVALID_AUTH,
    ERROR_TIMEOUT,
    ERROR_UNKNOWN,
)

TOKEN_VALUE = "flow_token"


@pytest.fixture
def flow() -> CecotecMamboConfigFlow:
    """Create a CecotecMamboConfigFlow instance for testing."""
    flow_instance = CecotecMamboConfigFlow()
    flow_instance.hass = Mock()
    flow_instance.async_set_unique_id = AsyncMock()
    flow_instance._abort_if_unique_id_configured = Mock()
    flow_instance.async_create_entry = Mock(
        return_value={"type": FlowResultType.CREATE_ENTRY},
    )
    flow_instance.async_show_form = Mock(return_value={"type": FlowResultType.FORM})
    return flow_instance


@pytest.fixture
def user_input() -> dict[str, str]:
    """Provide valid user input."""
    return {
        CONF_EMAIL: "Cook@Example.com",
        CONF_PASSWORD: "password123",
        CONF_RECIPES_PATH: "/config/my_recipes.yaml",
    }


def _patch_login(**kwargs):
    return patch(
        "custom_components.cecotec_mambo.config_flow.api.async_login",
        **kwargs,
    )


@pytest.fixture(autouse=True)
def mock_get_async_client() -> Mock:
    """Patch the shared Home Assistant httpx client."""
    with patch(
        "custom_components.cecotec_mambo.config_flow.get_async_client",
        return_value=Mock(),
    ) as get_client:
        yield get_client


class TestCecotecMamboConfigFlowAsyncStepUser:
    """Tests for async_step_user method."""

    @pytest.mark.asyncio
    async def test_async_step_user_shows_form_when_no_input(
        self,
        flow: CecotecMamboConfigFlow,
    ) -> None:
        """Test that async_step_user shows form when no input provided."""
        result = await flow.async_step_user()
        flow.async_show_form.assert_called_once()
        assert flow.async_show_form.call_args[1]["errors"] == {}
        assert result["type"] == FlowResultType.FORM

    @pytest.mark.asyncio
    async def test_async_step_user_creates_entry_on_successful_login(
        self,
        flow: CecotecMamboConfigFlow,
        user_input: dict[str, str],
    ) -> None:
        """Test that a successful login creates the entry with the token."""
        with _patch_login(return_value=TOKEN_VALUE) as mock_login:
            result = await flow.async_step_user(user_input)

        mock_login.assert_awaited_once()
        assert mock_login.call_args[0][1:] == ("Cook@Example.com", "password123")
        flow.async_set_unique_id.assert_called_once_with("cook@example.com")
        flow._abort_if_unique_id_configured.assert_called_once()
        call_args = flow.async_create_entry.call_args
        assert call_args[1]["title"] == "Cecotec Mambo (Cook@Example.com)"
        assert call_args[1]["data"] == {
            CONF_EMAIL: "Cook@Example.com",
            CONF_PASSWORD: "password123",
            CONF_TOKEN: TOKEN_VALUE,
            CONF_RECIPES_PATH: "/config/my_recipes.yaml",
        }
        assert result["type"] == FlowResultType.CREATE_ENTRY

    @pytest.mark.asyncio
    async def test_async_step_user_defaults_recipes_path(
        self,
        flow: CecotecMamboConfigFlow,
    ) -> None:
        """Test that a missing recipe path is stored as empty."""
        with _patch_login(return_value=TOKEN_VALUE):
            await flow.async_step_user(
                {CONF_EMAIL: "cook@example.com", CONF_PASSWORD: "pw"}
            )

        data = flow.async_create_entry.call_args[1]["data"]
        assert data[CONF_RECIPES_PATH] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (api.MamboApiAuthError("Invalid credentials"), ERROR_INVALID_AUTH),
            (httpx.TimeoutException("Request timeout"), ERROR_TIMEOUT),
            (httpx.ConnectError("Connection failed"), ERROR_CANNOT_CONNECT),
            (api.MamboApiClientError("Server error"), ERROR_CANNOT_CONNECT),
            (ValueError("Unexpected"), ERROR_UNKNOWN),
        ],
    )
    async def test_async_step_user_shows_error(
        self,
        flow: CecotecMamboConfigFlow,
        user_input: dict[str, str],
        error: Exception,
        expected: str,
    ) -> None:
        """Test that login failures map to form errors."""
        with _patch_login(side_effect=error):
            result = await flow.async_step_user(user_input)

        flow.async_show_form.assert_called_once()
        assert flow.async_show_form.call_args[1]["errors"]["base"] == expected
        flow.async_create_entry.assert_not_called()
        assert result["type"] == FlowResultType.FORM
