"""Error types for webservice requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

INVALID_RESPONSE_MESSAGE = "HTTP URL Response is invalid"


class WebserviceErrorPayload(BaseModel):
    """Marker base for JSON error bodies returned by a web service.

    Subclasses declare the fields they expect; unknown fields are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


class WebserviceError(RuntimeError):
    """Base error for webservice request failures."""


class InvalidUrlError(WebserviceError):
    """Raised when a route does not parse as an absolute http(s) URL."""

    def __init__(self, route: object) -> None:
        self.route = route
        super().__init__(f"invalid url: {route!r}")


class HTTPError(WebserviceError):
    """Raised for any response outside the 2xx range."""

    def __init__(self, status_code: int, payload: WebserviceErrorPayload | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        message = f"http error {status_code}"
        if payload is not None:
            message = f"{message}: {payload!r}"
        super().__init__(message)


class NoConnectionError(WebserviceError):
    """Raised when the transport cannot reach the host."""

    def __init__(self, route: str) -> None:
        self.route = route
        super().__init__(f"no connection: {route}")


class OtherError(WebserviceError):
    """Raised for failures that fit no other category."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
