"""Authentication session for the Cecotec Mambo cloud."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from . import api

_LOGGER = logging.getLogger(__name__)


class MamboSession:
    """Hold the bearer token and the credentials used to obtain it.

    The token is only replaced by an explicit login. A failed login keeps
    whatever token was held before, so callers never see an exception.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        email: str | None,
        password: str | None,
        token: str | None = None,
        persist_token: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the session."""
        self.client = client
        self.email = email
        self.password = password
        self.token = token
        self._persist_token = persist_token

    @property
    def authenticated(self) -> bool:
        """Return True when a token is held."""
        return bool(self.token)

    async def async_login(self) -> str | None:
        """Log in and store the returned token.

        Returns:
            The new token, or None if the login failed.

        """
        if not self.email or not self.password:
            _LOGGER.error("Cannot log in to Mambo cloud: email or password missing")
            return None

        try:
            token = await api.async_login(self.client, self.email, self.password)
        except api.MamboApiAuthError as err:
            _LOGGER.warning("Mambo login rejected for %s: %s", self.email, err)
            return None
        except api.MamboApiClientError as err:
            _LOGGER.error("Mambo login failed: %s", err)
            return None
        except httpx.RequestError as err:
            _LOGGER.error("Connection error during Mambo login: %s", err)
            return None

        self.token = token
        _LOGGER.info("Logged in to Mambo cloud")
        return token

    async def async_refresh_token(self) -> bool:
        """Log in again and persist the new token.

        Returns:
            True if a new token was obtained.

        """
        token = await self.async_login()
        if token is None:
            return False

        if self._persist_token is not None:
            self._persist_token(token)
        _LOGGER.info("Mambo token refreshed")
        return True
