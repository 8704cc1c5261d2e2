from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .models import BotSearchResult, BotSortField

if TYPE_CHECKING:  # pragma: no cover
    from .client import TopGG

MAX_LIMIT = 500
DEFAULT_LIMIT = 50


class BotSearchBuilder:
    """Fluent builder for bot search queries.

    Setters return the builder itself. The limit is passed through as is; the
    API caps it at ``MAX_LIMIT`` and defaults to ``DEFAULT_LIMIT``. Obtain a new
    builder from :meth:`TopGG.search` for every query.
    """

    def __init__(self, client: "TopGG") -> None:
        self._client = client
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._sort: Optional[BotSortField] = None
        self._fields: Optional[List[str]] = None

    def with_limit(self, limit: int) -> "BotSearchBuilder":
        self._limit = limit
        return self

    def with_offset(self, offset: int) -> "BotSearchBuilder":
        self._offset = offset
        return self

    def sort_by(self, field: Union[BotSortField, str]) -> "BotSearchBuilder":
        """Set sort order. Use the ``*_DESC`` members for descending order."""

        # raises ValueError for values outside BotSortField
        self._sort = BotSortField(field)
        return self

    def with_fields(self, *fields: str) -> "BotSearchBuilder":
        """Replace the list of fields to include in the response."""

        self._fields = list(fields)
        return self

    def include_field(self, field: str) -> "BotSearchBuilder":
        if self._fields is None:
            self._fields = []
        self._fields.append(field)
        return self

    def build_params(self) -> Dict[str, Any]:
        """Return query parameters that were explicitly set."""

        params: Dict[str, Any] = {}
        if self._limit is not None:
            params["limit"] = self._limit
        if self._offset is not None:
            params["offset"] = self._offset
        if self._sort is not None:
            params["sort"] = self._sort.value
        if self._fields is not None:
            params["fields"] = ",".join(self._fields)
        return params

    def execute(self) -> BotSearchResult:
        return self._client.search_bots(**self.build_params())

    async def execute_async(self) -> BotSearchResult:
        return await self._client.search_bots_async(**self.build_params())


__all__ = ["BotSearchBuilder", "MAX_LIMIT", "DEFAULT_LIMIT"]
