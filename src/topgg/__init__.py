from __future__ import annotations

from .builder import BOT_ID_ENV_VAR, TOKEN_ENV_VAR, TopGGClientBuilder
from .classifier import classify_response, parse_error_message, parse_retry_after
from .client import TopGG
from .exceptions import (
    STRUCTURED_FAILURES,
    ClientError,
    ConfigurationError,
    DeserializationError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TopGGError,
    TransportError,
    UnclassifiedError,
)
from .models import (
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice,
    ApplicationCommandOptionType,
    ApplicationCommandType,
    Bot,
    BotReviews,
    BotSearchResult,
    BotSortField,
    BotStats,
    BotStatsPost,
    ChannelType,
    EntryPointCommandHandlerType,
    IntegrationType,
    InteractionContextType,
    ShardServerCounts,
    TotalServerCount,
    Vote,
    VoteCheck,
    VoteStatus,
)
from .pipeline import RequestPipeline
from .search import BotSearchBuilder
from .snowflake import (
    decode_optional_snowflake,
    decode_snowflake,
    decode_snowflake_list,
    encode_optional_snowflake,
    encode_snowflake,
    encode_snowflake_list,
)
from .structures import ApiVersion, RequestArgs

__all__ = [
    "TopGG",
    "TopGGClientBuilder",
    "BotSearchBuilder",
    "RequestPipeline",
    "ApiVersion",
    "RequestArgs",
    "TOKEN_ENV_VAR",
    "BOT_ID_ENV_VAR",
    "classify_response",
    "parse_error_message",
    "parse_retry_after",
    "encode_snowflake",
    "decode_snowflake",
    "encode_optional_snowflake",
    "decode_optional_snowflake",
    "encode_snowflake_list",
    "decode_snowflake_list",
    "TopGGError",
    "TransportError",
    "DeserializationError",
    "NotFoundError",
    "RateLimitedError",
    "ClientError",
    "ServerError",
    "UnclassifiedError",
    "ConfigurationError",
    "STRUCTURED_FAILURES",
    "Bot",
    "BotReviews",
    "BotSearchResult",
    "BotSortField",
    "BotStats",
    "BotStatsPost",
    "TotalServerCount",
    "ShardServerCounts",
    "Vote",
    "VoteCheck",
    "VoteStatus",
    "ApplicationCommand",
    "ApplicationCommandOption",
    "ApplicationCommandOptionChoice",
    "ApplicationCommandType",
    "ApplicationCommandOptionType",
    "ChannelType",
    "IntegrationType",
    "InteractionContextType",
    "EntryPointCommandHandlerType",
]
