"""Typed payloads exchanged with the Top.gg API.

Responses are matched case-insensitively on field names. Request payloads
serialize to JSON-ready dicts in which unset optional members are absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Sequence, Union

from .snowflake import (
    decode_optional_snowflake,
    decode_snowflake,
    decode_snowflake_list,
    encode_optional_snowflake,
)
from .utils import normalize_keys, parse_datetime


def _str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else _str(value)


def _int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer, got {type(value).__name__}")
    return value


def _opt_int(value: Any) -> Optional[int]:
    return None if value is None else _int(value)


def _float(value: Any, default: float = 0.0) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected number, got {type(value).__name__}")
    return float(value)


def _str_list(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"expected array, got {type(value).__name__}")
    return [_str(item) for item in value]


def _required(payload: Dict[str, Any], key: str) -> Any:
    if payload.get(key) is None:
        raise ValueError(f"missing required field '{key}'")
    return payload[key]


class BotSortField(Enum):
    """Sort orders accepted by the bot search endpoint; values are wire values."""

    USERNAME = "username"
    USERNAME_DESC = "-username"
    ID = "id"
    ID_DESC = "-id"
    SERVER_COUNT = "server_count"
    SERVER_COUNT_DESC = "-server_count"
    POINTS = "points"
    POINTS_DESC = "-points"
    MONTHLY_POINTS = "monthlyPoints"
    MONTHLY_POINTS_DESC = "-monthlyPoints"
    DATE = "date"
    DATE_DESC = "-date"

    @property
    def field_name(self) -> str:
        return self.value.lstrip("-")

    @property
    def descending(self) -> bool:
        return self.value.startswith("-")


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3
    PRIMARY_ENTRY_POINT = 4


class ApplicationCommandOptionType(IntEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class ChannelType(IntEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16


class IntegrationType(IntEnum):
    GUILD_INSTALL = 0
    USER_INSTALL = 1


class InteractionContextType(IntEnum):
    GUILD = 0
    BOT_DM = 1
    PRIVATE_CHANNEL = 2


class EntryPointCommandHandlerType(IntEnum):
    APP_HANDLER = 1
    DISCORD_LAUNCH_ACTIVITY = 2


@dataclass(frozen=True)
class ProblemDetails:
    """RFC 7807 style error body."""

    type: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "ProblemDetails":
        data = normalize_keys(payload)
        return cls(
            type=_opt_str(data.get("type")),
            title=_opt_str(data.get("title")),
            status=_opt_int(data.get("status")),
            detail=_opt_str(data.get("detail")),
        )


@dataclass
class BotReviews:
    average_score: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, payload: Any) -> "BotReviews":
        data = normalize_keys(payload)
        return cls(average_score=_float(data.get("averagescore")), count=_int(data.get("count")))


@dataclass
class Bot:
    """Bot listing as returned by the search endpoint."""

    id: int
    username: str = ""
    client_id: Optional[int] = None
    avatar: Optional[str] = None
    prefix: Optional[str] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    tags: Optional[List[str]] = None
    website: Optional[str] = None
    support: Optional[str] = None
    github: Optional[str] = None
    owners: Optional[List[int]] = None
    invite: Optional[str] = None
    date: Optional[datetime] = None
    vanity: Optional[str] = None
    points: int = 0
    monthly_points: int = 0
    server_count: Optional[int] = None
    reviews: Optional[BotReviews] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "Bot":
        data = normalize_keys(payload)
        date = data.get("date")
        reviews = data.get("reviews")
        return cls(
            id=decode_snowflake(_required(data, "id")),
            username=_str(data.get("username")),
            client_id=decode_optional_snowflake(data.get("clientid")),
            avatar=_opt_str(data.get("avatar")),
            prefix=_opt_str(data.get("prefix")),
            short_description=_opt_str(data.get("shortdesc")),
            long_description=_opt_str(data.get("longdesc")),
            tags=_str_list(data.get("tags")),
            website=_opt_str(data.get("website")),
            support=_opt_str(data.get("support")),
            github=_opt_str(data.get("github")),
            owners=decode_snowflake_list(data.get("owners")),
            invite=_opt_str(data.get("invite")),
            date=None if date is None else parse_datetime(date),
            vanity=_opt_str(data.get("vanity")),
            points=_int(data.get("points")),
            monthly_points=_int(data.get("monthlypoints")),
            server_count=_opt_int(data.get("server_count")),
            reviews=None if reviews is None else BotReviews.from_dict(reviews),
        )


@dataclass
class BotSearchResult:
    results: List[Bot] = field(default_factory=list)
    limit: int = 0
    offset: int = 0
    count: int = 0
    total: int = 0

    @classmethod
    def from_dict(cls, payload: Any) -> "BotSearchResult":
        data = normalize_keys(payload)
        results = data.get("results")
        if results is None:
            results = []
        if not isinstance(results, list):
            raise TypeError(f"expected array of bots, got {type(results).__name__}")
        return cls(
            results=[Bot.from_dict(item) for item in results],
            limit=_int(data.get("limit")),
            offset=_int(data.get("offset")),
            count=_int(data.get("count")),
            total=_int(data.get("total")),
        )


@dataclass
class BotStats:
    server_count: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "BotStats":
        data = normalize_keys(payload)
        return cls(server_count=_opt_int(data.get("server_count")))


@dataclass(frozen=True)
class TotalServerCount:
    """Single server count for the whole bot."""

    count: int

    def to_json(self) -> int:
        return self.count


@dataclass(frozen=True)
class ShardServerCounts:
    """Server count reported per shard, indexed by shard id."""

    counts: Sequence[int]

    def to_json(self) -> List[int]:
        return list(self.counts)


ServerCount = Union[TotalServerCount, ShardServerCounts]


def as_server_count(value: Union[int, Sequence[int], ServerCount]) -> ServerCount:
    """Coerce plain int or list of ints into :data:`ServerCount`."""

    if isinstance(value, (TotalServerCount, ShardServerCounts)):
        return value
    if isinstance(value, bool):
        raise TypeError("server count must be int or sequence of int")
    if isinstance(value, int):
        return TotalServerCount(value)
    if isinstance(value, (list, tuple)):
        return ShardServerCounts(tuple(value))
    raise TypeError("server count must be int or sequence of int")


@dataclass
class BotStatsPost:
    server_count: ServerCount
    shards: Optional[List[int]] = None
    shard_id: Optional[int] = None
    shard_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "server_count": self.server_count.to_json(),
            "shards": self.shards,
            "shard_id": self.shard_id,
            "shard_count": self.shard_count,
        }


@dataclass
class Vote:
    id: int
    username: str = ""
    avatar: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "Vote":
        data = normalize_keys(payload)
        return cls(
            id=decode_snowflake(_required(data, "id")),
            username=_str(data.get("username")),
            avatar=_opt_str(data.get("avatar")),
        )

    @classmethod
    def list_from_json(cls, payload: Any) -> List["Vote"]:
        if not isinstance(payload, list):
            raise TypeError(f"expected array of votes, got {type(payload).__name__}")
        return [cls.from_dict(item) for item in payload]


@dataclass
class VoteCheck:
    voted: int = 0

    @property
    def has_voted(self) -> bool:
        return self.voted == 1

    @classmethod
    def from_dict(cls, payload: Any) -> "VoteCheck":
        data = normalize_keys(payload)
        return cls(voted=_int(data.get("voted")))


@dataclass
class VoteStatus:
    created_at: datetime
    expires_at: datetime
    weight: int = 0

    @classmethod
    def from_dict(cls, payload: Any) -> "VoteStatus":
        data = normalize_keys(payload)
        return cls(
            created_at=parse_datetime(_required(data, "created_at")),
            expires_at=parse_datetime(_required(data, "expires_at")),
            weight=_int(data.get("weight")),
        )


@dataclass
class ApplicationCommandOptionChoice:
    name: str
    value: Union[str, int, float]
    name_localizations: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "name_localizations": self.name_localizations,
            "value": self.value,
        }


@dataclass
class ApplicationCommandOption:
    type: ApplicationCommandOptionType
    name: str
    description: str
    name_localizations: Optional[Dict[str, str]] = None
    description_localizations: Optional[Dict[str, str]] = None
    required: Optional[bool] = None
    choices: Optional[List[ApplicationCommandOptionChoice]] = None
    options: Optional[List["ApplicationCommandOption"]] = None
    channel_types: Optional[List[ChannelType]] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    autocomplete: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": int(self.type),
            "name": self.name,
            "name_localizations": self.name_localizations,
            "description": self.description,
            "description_localizations": self.description_localizations,
            "required": self.required,
            "choices": None if self.choices is None else [choice.to_dict() for choice in self.choices],
            "options": None if self.options is None else [option.to_dict() for option in self.options],
            "channel_types": None if self.channel_types is None else [int(item) for item in self.channel_types],
            "min_value": self.min_value,
            "max_value": self.max_value,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "autocomplete": self.autocomplete,
        }


@dataclass
class ApplicationCommand:
    """Discord application command descriptor posted to the project endpoint."""

    name: str
    description: str = ""
    id: Optional[int] = None
    type: Optional[ApplicationCommandType] = None
    application_id: Optional[int] = None
    guild_id: Optional[int] = None
    name_localizations: Optional[Dict[str, str]] = None
    description_localizations: Optional[Dict[str, str]] = None
    options: Optional[List[ApplicationCommandOption]] = None
    default_member_permissions: Optional[str] = None
    dm_permission: Optional[bool] = None
    default_permission: Optional[bool] = None
    nsfw: Optional[bool] = None
    integration_types: Optional[List[IntegrationType]] = None
    contexts: Optional[List[InteractionContextType]] = None
    version: Optional[int] = None
    handler: Optional[EntryPointCommandHandlerType] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": encode_optional_snowflake(self.id),
            "type": None if self.type is None else int(self.type),
            "application_id": encode_optional_snowflake(self.application_id),
            "guild_id": encode_optional_snowflake(self.guild_id),
            "name": self.name,
            "name_localizations": self.name_localizations,
            "description": self.description,
            "description_localizations": self.description_localizations,
            "options": None if self.options is None else [option.to_dict() for option in self.options],
            "default_member_permissions": self.default_member_permissions,
            "dm_permission": self.dm_permission,
            "default_permission": self.default_permission,
            "nsfw": self.nsfw,
            "integration_types": None
            if self.integration_types is None
            else [int(item) for item in self.integration_types],
            "contexts": None if self.contexts is None else [int(item) for item in self.contexts],
            "version": encode_optional_snowflake(self.version),
            "handler": None if self.handler is None else int(self.handler),
        }


__all__ = [
    "BotSortField",
    "ApplicationCommandType",
    "ApplicationCommandOptionType",
    "ChannelType",
    "IntegrationType",
    "InteractionContextType",
    "EntryPointCommandHandlerType",
    "ProblemDetails",
    "BotReviews",
    "Bot",
    "BotSearchResult",
    "BotStats",
    "TotalServerCount",
    "ShardServerCounts",
    "ServerCount",
    "as_server_count",
    "BotStatsPost",
    "Vote",
    "VoteCheck",
    "VoteStatus",
    "ApplicationCommandOptionChoice",
    "ApplicationCommandOption",
    "ApplicationCommand",
]
