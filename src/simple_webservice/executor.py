"""Async request executor that decodes JSON responses into caller types."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from simple_webservice.errors import (
    INVALID_RESPONSE_MESSAGE,
    HTTPError,
    InvalidUrlError,
    NoConnectionError,
    OtherError,
    WebserviceErrorPayload,
)
from simple_webservice.http import (
    HeaderField,
    HTTPMethod,
    Route,
    encode_body,
    parse_route,
    resolve_headers,
)
from simple_webservice.settings import WebserviceSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=WebserviceErrorPayload)


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _decode(target: type[T], content: bytes) -> T:
    return _adapter(target).validate_json(content)


class RequestExecutor:
    """Stateless executor for one-shot JSON requests.

    Share one instance across tasks. When no client is injected the executor
    creates its own ``httpx.AsyncClient``, optionally over ``transport``, and
    closes it in ``aclose``.
    """

    def __init__(
        self,
        settings: WebserviceSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or WebserviceSettings()
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(transport=transport)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RequestExecutor:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def execute(
        self,
        route: Route,
        success_type: type[T],
        error_type: type[E],
        *,
        method: HTTPMethod = HTTPMethod.GET,
        header_fields: Mapping[HeaderField | str, str] | None = None,
        body: Mapping[str, Any] | None = None,
        timeout_interval: float | None = None,
    ) -> T:
        """Send one request and decode the response.

        Args:
            route: Absolute http(s) URL of the endpoint.
            success_type: Type the body of a 2xx response is decoded into.
            error_type: Payload type the body of a >=400 response is decoded into.
            method: HTTP verb.
            header_fields: Headers to set, one wire header per case-insensitive name.
            body: JSON-serializable mapping sent as the request payload.
            timeout_interval: Seconds before the request is abandoned. Defaults
                to ``settings.timeout_s``.

        Returns:
            The decoded success value.

        Raises:
            InvalidUrlError: ``route`` is not an absolute http(s) URL.
            NoConnectionError: The transport could not connect.
            HTTPError: The response status is outside 2xx.
            OtherError: The response carries no status code.
        """
        url = parse_route(route)
        if url is None:
            raise InvalidUrlError(route)

        timeout = self.settings.timeout_s if timeout_interval is None else timeout_interval
        request = httpx.Request(
            str(method),
            url,
            headers=resolve_headers(header_fields),
            content=encode_body(body),
            extensions={"timeout": httpx.Timeout(timeout).as_dict()},
        )

        logger.debug("%s %s timeout=%.1fs", request.method, url, timeout)
        try:
            response = await self._client.send(request)
        except httpx.ConnectError as exc:
            raise NoConnectionError(str(url)) from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or isinstance(status_code, bool):
            raise OtherError(INVALID_RESPONSE_MESSAGE)
        logger.debug("%s %s -> %d", request.method, url, status_code)

        content = response.content
        if 200 <= status_code <= 299:
            return _decode(success_type, content)
        if status_code >= 400:
            try:
                payload = _decode(error_type, content)
            except ValidationError as exc:
                logger.debug(
                    "undecodable error payload for status %d: %d validation errors",
                    status_code,
                    exc.error_count(),
                )
                raise HTTPError(status_code) from None
            raise HTTPError(status_code, payload)
        raise HTTPError(status_code)

    async def upload(self, *args: Any, **kwargs: Any) -> Any:
        """Reserved for binary uploads."""
        raise NotImplementedError("upload is not implemented")

    async def download(self, *args: Any, **kwargs: Any) -> Any:
        """Reserved for binary downloads."""
        raise NotImplementedError("download is not implemented")
