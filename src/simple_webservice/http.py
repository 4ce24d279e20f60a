"""Request vocabulary: routes, methods, header names and body encoding."""

from __future__ import annotations

import ipaddress
import json
import re
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

import httpx

Route = str

_ALLOWED_SCHEMES = {"http", "https"}
_HOST_LABEL = re.compile(r"^(?!-)[A-Za-z0-9_-]{1,63}(?<!-)$")


class HTTPMethod(StrEnum):
    """HTTP verbs supported by the executor."""

    POST = "POST"
    GET = "GET"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class HeaderField(StrEnum):
    """Recognized request header names; plain strings extend the set."""

    ACCEPT = "Accept"
    ACCEPT_ENCODING = "Accept-Encoding"
    ACCEPT_LANGUAGE = "Accept-Language"
    AUTHORIZATION = "Authorization"
    CACHE_CONTROL = "Cache-Control"
    CONTENT_TYPE = "Content-Type"
    COOKIE = "Cookie"
    IF_NONE_MATCH = "If-None-Match"
    USER_AGENT = "User-Agent"


def parse_route(route: Route) -> httpx.URL | None:
    """Parse a route into an absolute http(s) URL, or ``None`` when it is not one."""
    if not isinstance(route, str) or not route or any(char.isspace() for char in route):
        return None
    try:
        url = httpx.URL(route)
    except httpx.InvalidURL:
        return None
    if url.scheme not in _ALLOWED_SCHEMES or not _valid_host(url.raw_host):
        return None
    return url


def _valid_host(raw_host: bytes) -> bool:
    # httpx percent-encodes illegal authority characters instead of rejecting them.
    try:
        host = raw_host.decode("ascii")
    except UnicodeDecodeError:
        return False
    if not host:
        return False
    try:
        ipaddress.ip_address(host)
    except ValueError:
        pass
    else:
        return True
    labels = host.removesuffix(".").split(".")
    return all(_HOST_LABEL.match(label) for label in labels)


def resolve_headers(header_fields: Mapping[HeaderField | str, str] | None) -> list[tuple[str, str]]:
    """Resolve header keys to their wire names, one pair per entry.

    Keys that differ only in case name the same header; the last entry wins.
    """
    if not header_fields:
        return []
    resolved: dict[str, tuple[str, str]] = {}
    for key, value in header_fields.items():
        name = str(key)
        resolved[name.lower()] = (name, value)
    return list(resolved.values())


def encode_body(body: Mapping[str, Any] | None) -> bytes | None:
    """Serialize a request body to JSON bytes.

    Serialization errors (``TypeError``, ``ValueError``) are raised as-is.
    """
    if body is None:
        return None
    return json.dumps(dict(body), allow_nan=False).encode("utf-8")
