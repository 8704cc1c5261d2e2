"""Request pipeline shared by every Top.gg API operation.

A call builds the URL and authorization header for the endpoint's API
generation, sends the exchange over the supplied transport, reads the whole
body, classifies failures and finally hands the decoded JSON to a parser.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar, Union
from urllib.parse import urlencode

import httpx
import requests

from .classifier import classify_response
from .exceptions import DeserializationError, TransportError
from .structures import CURRENT_BASE_URL, LEGACY_BASE_URL, ApiVersion, RequestArgs
from .utils import dump_json

logger = logging.getLogger(__name__)

T = TypeVar("T")
Parser = Callable[[Any], T]
SyncTransport = Union[httpx.Client, requests.Session]


class RequestPipeline:
    """Authenticated dispatch of :class:`RequestArgs` over httpx or requests."""

    def __init__(
        self,
        token: str,
        *,
        timeout: float = 10.0,
        legacy_base_url: str = LEGACY_BASE_URL,
        current_base_url: str = CURRENT_BASE_URL,
    ) -> None:
        self._token = token
        self.timeout = timeout
        self._base_urls = {
            ApiVersion.LEGACY: legacy_base_url.rstrip("/"),
            ApiVersion.CURRENT: current_base_url.rstrip("/"),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(legacy={self._base_urls[ApiVersion.LEGACY]!r}, current={self._base_urls[ApiVersion.CURRENT]!r})"

    def build_url(self, version: ApiVersion, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        if not isinstance(path, str):
            raise TypeError("path must be str")
        url = self._base_urls[version] + "/" + path.strip("/")
        if not params:
            return url
        clean = {k: v for k, v in params.items() if v is not None}
        if not clean:
            return url
        return f"{url}?{urlencode(clean)}"

    def build_headers(self, version: ApiVersion, with_body: bool) -> Dict[str, str]:
        headers = {
            "Authorization": version.authorization(self._token),
            "Accept": "application/json",
        }
        if with_body:
            headers["Content-Type"] = "application/json; charset=utf-8"
        return headers

    def _prepare(self, args: RequestArgs):
        version = args["version"]
        method = args["method"]
        url = self.build_url(version, args["path"], args.get("params"))
        body = args.get("json_body")
        data = None if body is None else dump_json(body)
        headers = self.build_headers(version, data is not None)
        logger.debug("%s %s (%s)", method, url, version.value)
        return method, url, data, headers

    @staticmethod
    def _finish(
        method: str,
        url: str,
        status_code: int,
        headers: Mapping[str, str],
        text: str,
        parse: Optional[Parser],
    ) -> Any:
        logger.debug("%s %s -> %s", method, url, status_code)
        error = classify_response(status_code, headers, text)
        if error is not None:
            logger.warning("%s %s failed: %s", method, url, error)
            raise error
        if parse is None:
            return None
        try:
            payload = json.loads(text)
            if payload is None:
                raise ValueError("response body is null")
            return parse(payload)
        except (ValueError, TypeError, KeyError) as exc:
            raise DeserializationError("Failed to deserialize response from Top.gg API", text) from exc

    def execute(self, transport: SyncTransport, args: RequestArgs, parse: Optional[Parser] = None) -> Any:
        method, url, data, headers = self._prepare(args)

        if isinstance(transport, requests.Session):
            try:
                response = transport.request(method, url, data=data, headers=headers, timeout=self.timeout)
            except requests.RequestException as exc:
                logger.warning("%s %s transport failure: %s", method, url, exc)
                raise TransportError("Failed to send request to Top.gg API") from exc
        else:
            try:
                response = transport.request(method, url, content=data, headers=headers)
            except httpx.HTTPError as exc:
                logger.warning("%s %s transport failure: %s", method, url, exc)
                raise TransportError("Failed to send request to Top.gg API") from exc

        return self._finish(method, url, int(response.status_code), response.headers, response.text, parse)

    async def execute_async(
        self, transport: httpx.AsyncClient, args: RequestArgs, parse: Optional[Parser] = None
    ) -> Any:
        method, url, data, headers = self._prepare(args)
        # asyncio.CancelledError is not an httpx.HTTPError and propagates unchanged
        try:
            response = await transport.request(method, url, content=data, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("%s %s transport failure: %s", method, url, exc)
            raise TransportError("Failed to send request to Top.gg API") from exc

        return self._finish(method, url, int(response.status_code), response.headers, response.text, parse)


__all__ = ["RequestPipeline", "Parser", "SyncTransport"]
