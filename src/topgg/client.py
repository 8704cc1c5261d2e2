from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

import httpx

from .exceptions import ConfigurationError
from .models import (
    ApplicationCommand,
    BotSearchResult,
    BotSortField,
    BotStats,
    BotStatsPost,
    ServerCount,
    Vote,
    VoteCheck,
    VoteStatus,
    as_server_count,
)
from .pipeline import Parser, RequestPipeline, SyncTransport
from .search import BotSearchBuilder
from .snowflake import encode_snowflake
from .structures import CURRENT_BASE_URL, LEGACY_BASE_URL, ApiVersion, RequestArgs

logger = logging.getLogger(__name__)


@dataclass
class TopGG:
    """Top.gg API client with sync and async methods.

    Transports passed as ``http_client`` / ``async_http_client`` are borrowed
    and never closed by the client. When omitted, the client owns its httpx
    clients: the sync one is created up front, the async one on the first
    ``*_async`` call. :meth:`close` releases only the sync transport, so a
    client used for async calls must be released with :meth:`aclose` or
    ``async with``. ``http_client`` may also be a ``requests.Session``.
    """

    token: str = field(repr=False)
    bot_id: Optional[int] = None
    timeout: float = 10.0
    http_client: Optional[SyncTransport] = field(default=None, repr=False)
    async_http_client: Optional[httpx.AsyncClient] = field(default=None, repr=False)
    legacy_base_url: str = LEGACY_BASE_URL
    current_base_url: str = CURRENT_BASE_URL
    client_options: Optional[Dict[str, Any]] = field(default=None, repr=False)

    _pipeline: RequestPipeline = field(init=False, repr=False)
    _owns_http_client: bool = field(init=False, repr=False, default=False)
    _owns_async_http_client: bool = field(init=False, repr=False, default=False)
    _closed: bool = field(init=False, repr=False, default=False)
    _async_closed: bool = field(init=False, repr=False, default=False)

    def __post_init__(self) -> None:
        if not isinstance(self.token, str):
            raise TypeError("token must be str")
        if not self.token:
            raise ValueError("token cannot be empty")
        if self.bot_id is not None:
            encode_snowflake(self.bot_id)

        self._pipeline = RequestPipeline(
            self.token,
            timeout=self.timeout,
            legacy_base_url=self.legacy_base_url,
            current_base_url=self.current_base_url,
        )
        if self.http_client is None:
            self.http_client = httpx.Client(**self._owned_client_options())
            self._owns_http_client = True

    def _owned_client_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"timeout": self.timeout}
        options.update(self.client_options or {})
        return options

    def _async_transport(self) -> httpx.AsyncClient:
        if self.async_http_client is None:
            if self._async_closed:
                raise RuntimeError("Cannot send a request, as the client has been closed.")
            self.async_http_client = httpx.AsyncClient(**self._owned_client_options())
            self._owns_async_http_client = True
        return self.async_http_client

    def close(self) -> None:
        """Close owned sync transport. Safe to call more than once.

        An owned async transport, once created by an ``*_async`` call, is
        left open and needs :meth:`aclose`.
        """

        if self._closed:
            return
        self._closed = True
        if self._owns_http_client:
            self.http_client.close()
        logger.debug("Top.gg sync transport released")

    async def aclose(self) -> None:
        """Close all owned transports. Safe to call more than once."""

        if not self._async_closed:
            self._async_closed = True
            if self._owns_async_http_client:
                await self.async_http_client.aclose()
            logger.debug("Top.gg async transport released")
        self.close()

    def __enter__(self) -> "TopGG":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def __aenter__(self) -> "TopGG":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _send(self, args: RequestArgs, parse: Optional[Parser] = None) -> Any:
        return self._pipeline.execute(self.http_client, args, parse)

    async def _send_async(self, args: RequestArgs, parse: Optional[Parser] = None) -> Any:
        return await self._pipeline.execute_async(self._async_transport(), args, parse)

    def _require_bot_id(self) -> int:
        if self.bot_id is None:
            raise ConfigurationError(
                "Bot ID must be specified to use this endpoint. Pass bot_id to the client."
            )
        return self.bot_id

    def search(self) -> BotSearchBuilder:
        """Start a fluent bot search query."""

        return BotSearchBuilder(self)

    @staticmethod
    def _search_bots_props(
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Union[BotSortField, str, None] = None,
        fields: Union[str, Sequence[str], None] = None,
    ) -> RequestArgs:
        if sort:
            sort = BotSortField(sort).value
        if fields is not None and not isinstance(fields, str):
            fields = ",".join(fields)
        return RequestArgs(
            path="bots",
            params={
                "limit": limit,
                "offset": offset,
                "sort": sort or None,
                "fields": fields or None,
            },
        )

    def search_bots(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Union[BotSortField, str, None] = None,
        fields: Union[str, Sequence[str], None] = None,
    ) -> BotSearchResult:
        return self._send(self._search_bots_props(limit, offset, sort, fields), BotSearchResult.from_dict)

    async def search_bots_async(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Union[BotSortField, str, None] = None,
        fields: Union[str, Sequence[str], None] = None,
    ) -> BotSearchResult:
        return await self._send_async(
            self._search_bots_props(limit, offset, sort, fields), BotSearchResult.from_dict
        )

    def _bot_stats_props(self) -> RequestArgs:
        return RequestArgs(path=f"bots/{self._require_bot_id()}/stats")

    def get_bot_stats(self) -> BotStats:
        return self._send(self._bot_stats_props(), BotStats.from_dict)

    async def get_bot_stats_async(self) -> BotStats:
        return await self._send_async(self._bot_stats_props(), BotStats.from_dict)

    def _post_bot_stats_props(
        self,
        server_count: Union[int, Sequence[int], ServerCount],
        shards: Optional[List[int]] = None,
        shard_id: Optional[int] = None,
        shard_count: Optional[int] = None,
    ) -> RequestArgs:
        stats = BotStatsPost(
            server_count=as_server_count(server_count),
            shards=shards,
            shard_id=shard_id,
            shard_count=shard_count,
        )
        return RequestArgs(
            path=f"bots/{self._require_bot_id()}/stats",
            method="POST",
            json_body=stats.to_dict(),
        )

    def post_bot_stats(
        self,
        server_count: Union[int, Sequence[int], ServerCount],
        shards: Optional[List[int]] = None,
        shard_id: Optional[int] = None,
        shard_count: Optional[int] = None,
    ) -> None:
        """Post server count. A list of ints is sent as per-shard counts."""

        self._send(self._post_bot_stats_props(server_count, shards, shard_id, shard_count))

    async def post_bot_stats_async(
        self,
        server_count: Union[int, Sequence[int], ServerCount],
        shards: Optional[List[int]] = None,
        shard_id: Optional[int] = None,
        shard_count: Optional[int] = None,
    ) -> None:
        await self._send_async(self._post_bot_stats_props(server_count, shards, shard_id, shard_count))

    def _bot_votes_props(self) -> RequestArgs:
        return RequestArgs(path=f"bots/{self._require_bot_id()}/votes")

    def get_bot_votes(self) -> List[Vote]:
        """Return the most recent votes for the configured bot."""

        return self._send(self._bot_votes_props(), Vote.list_from_json)

    async def get_bot_votes_async(self) -> List[Vote]:
        return await self._send_async(self._bot_votes_props(), Vote.list_from_json)

    def _check_user_vote_props(self, user_id: int) -> RequestArgs:
        bot_id = self._require_bot_id()
        return RequestArgs(path=f"bots/{bot_id}/check", params={"userId": encode_snowflake(user_id)})

    def check_user_vote(self, user_id: int) -> VoteCheck:
        return self._send(self._check_user_vote_props(user_id), VoteCheck.from_dict)

    async def check_user_vote_async(self, user_id: int) -> VoteCheck:
        return await self._send_async(self._check_user_vote_props(user_id), VoteCheck.from_dict)

    @staticmethod
    def _update_bot_commands_props(commands: Sequence[ApplicationCommand]) -> RequestArgs:
        if commands is None:
            raise TypeError("commands cannot be None")
        return RequestArgs(
            path="projects/@me/commands",
            version=ApiVersion.CURRENT,
            method="POST",
            json_body=[command.to_dict() for command in commands],
        )

    def update_bot_commands(self, commands: Sequence[ApplicationCommand]) -> None:
        """Replace the command list shown on the bot's Top.gg page."""

        self._send(self._update_bot_commands_props(commands))

    async def update_bot_commands_async(self, commands: Sequence[ApplicationCommand]) -> None:
        await self._send_async(self._update_bot_commands_props(commands))

    @staticmethod
    def _vote_status_props(user_id: int, source: Optional[str] = None) -> RequestArgs:
        return RequestArgs(
            path=f"projects/@me/votes/{encode_snowflake(user_id)}",
            version=ApiVersion.CURRENT,
            params={"source": source or None},
        )

    def get_vote_status(self, user_id: int, source: Optional[str] = None) -> VoteStatus:
        return self._send(self._vote_status_props(user_id, source), VoteStatus.from_dict)

    async def get_vote_status_async(self, user_id: int, source: Optional[str] = None) -> VoteStatus:
        return await self._send_async(self._vote_status_props(user_id, source), VoteStatus.from_dict)


__all__ = ["TopGG"]
