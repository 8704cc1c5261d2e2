from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from .client import TopGG
from .exceptions import ConfigurationError, DeserializationError
from .pipeline import SyncTransport
from .snowflake import decode_snowflake

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "TOPGG_TOKEN"
BOT_ID_ENV_VAR = "TOPGG_BOT_ID"


class TopGGClientBuilder:
    """Fluent builder for :class:`TopGG`, with environment variable bootstrap."""

    def __init__(self) -> None:
        self._token: Optional[str] = None
        self._bot_id: Optional[int] = None
        self._http_client: Optional[SyncTransport] = None
        self._async_http_client: Optional[httpx.AsyncClient] = None
        self._client_options: Optional[Dict[str, Any]] = None

    @classmethod
    def create(cls) -> "TopGGClientBuilder":
        return cls()

    @property
    def bot_id(self) -> Optional[int]:
        return self._bot_id

    def with_token(self, token: str) -> "TopGGClientBuilder":
        self._token = token
        return self

    def with_bot_id(self, bot_id: int) -> "TopGGClientBuilder":
        self._bot_id = bot_id
        return self

    def with_http_client(self, http_client: SyncTransport) -> "TopGGClientBuilder":
        """Use borrowed sync transport (``httpx.Client`` or ``requests.Session``)."""

        self._http_client = http_client
        return self

    def with_async_http_client(self, async_http_client: httpx.AsyncClient) -> "TopGGClientBuilder":
        self._async_http_client = async_http_client
        return self

    def configure_http_client(self, **options: Any) -> "TopGGClientBuilder":
        """Keyword arguments for the httpx clients the built client creates itself.

        Ignored for transports supplied with :meth:`with_http_client` and
        :meth:`with_async_http_client`.
        """

        self._client_options = dict(options)
        return self

    def with_token_from_environment(self, variable_name: str = TOKEN_ENV_VAR) -> "TopGGClientBuilder":
        self._token = os.environ.get(variable_name)
        return self

    def with_bot_id_from_environment(self, variable_name: str = BOT_ID_ENV_VAR) -> "TopGGClientBuilder":
        """Read bot id from environment; unset or malformed values are ignored."""

        value = (os.environ.get(variable_name) or "").strip()
        if not value:
            return self
        try:
            self._bot_id = decode_snowflake(value)
        except DeserializationError:
            logger.warning("Ignoring %s: '%s' is not a valid bot id", variable_name, value)
        return self

    def build(self) -> TopGG:
        if not self._token:
            raise ConfigurationError(
                "Token is required. Use with_token() or with_token_from_environment()."
            )
        return TopGG(
            self._token,
            bot_id=self._bot_id,
            http_client=self._http_client,
            async_http_client=self._async_http_client,
            client_options=self._client_options,
        )

    def try_build(self) -> Optional[TopGG]:
        """Build client, or return ``None`` when no token is configured."""

        if not self._token:
            return None
        return self.build()


__all__ = ["TopGGClientBuilder", "TOKEN_ENV_VAR", "BOT_ID_ENV_VAR"]
