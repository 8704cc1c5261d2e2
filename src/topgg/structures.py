from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

LEGACY_BASE_URL = "https://top.gg/api"
CURRENT_BASE_URL = "https://top.gg/api/v1"


class ApiVersion(Enum):
    """API generation of an endpoint. Each generation has its own auth header shape."""

    LEGACY = "v0"
    CURRENT = "v1"

    def authorization(self, token: str) -> str:
        if self is ApiVersion.LEGACY:
            return token
        return f"Bearer {token}"


class RequestArgs(dict):
    """Container for request kwargs with validation."""

    def __init__(
        self,
        *,
        path: str,
        version: ApiVersion = ApiVersion.LEGACY,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        json_body: Any = None,
    ) -> None:
        if not isinstance(path, str):
            raise TypeError("path must be str")
        if not isinstance(version, ApiVersion):
            raise TypeError("version must be ApiVersion")
        if not isinstance(method, str):
            raise TypeError("method must be str")
        if params is not None and not isinstance(params, dict):
            raise TypeError("params must be dict or None")
        super().__init__(path=path, version=version, method=method)
        if params:
            self["params"] = params
        if json_body is not None:
            self["json_body"] = json_body


__all__ = ["ApiVersion", "RequestArgs", "LEGACY_BASE_URL", "CURRENT_BASE_URL"]
