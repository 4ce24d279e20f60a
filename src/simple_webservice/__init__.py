"""Minimal async HTTP client with typed JSON decoding."""

import logging

from simple_webservice.errors import (
    HTTPError,
    InvalidUrlError,
    NoConnectionError,
    OtherError,
    WebserviceError,
    WebserviceErrorPayload,
)
from simple_webservice.executor import RequestExecutor
from simple_webservice.http import HeaderField, HTTPMethod, Route
from simple_webservice.settings import WebserviceSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HTTPError",
    "HTTPMethod",
    "HeaderField",
    "InvalidUrlError",
    "NoConnectionError",
    "OtherError",
    "RequestExecutor",
    "Route",
    "WebserviceError",
    "WebserviceErrorPayload",
    "WebserviceSettings",
]
