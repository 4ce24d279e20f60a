import pytest

from simple_webservice.http import (
    HeaderField,
    HTTPMethod,
    encode_body,
    parse_route,
    resolve_headers,
)


def test_http_method_wire_values() -> None:
    assert [str(method) for method in HTTPMethod] == ["POST", "GET", "PUT", "PATCH", "DELETE"]


def test_parse_route_accepts_absolute_http_urls() -> None:
    url = parse_route("https://api.example.com/users/1?expand=roles")

    assert url is not None
    assert url.host == "api.example.com"
    assert url.path == "/users/1"
    assert parse_route("http://localhost:8080/health") is not None
    assert parse_route("http://127.0.0.1:5000/v1") is not None
    assert parse_route("http://[::1]:8080/") is not None
    assert parse_route("https://internal_api.example.com./") is not None


@pytest.mark.parametrize(
    "route",
    [
        "",
        "   ",
        "not a url",
        "users/1",
        "/users/1",
        "mailto:ann@example.com",
        "https://",
        "https://api example.com/users/1",
        " https://api.example.com/users/1",
        "https://exa<mple>.com/",
        "http://a..b/",
        "http://-api.example.com/",
    ],
)
def test_parse_route_rejects_non_urls(route: str) -> None:
    assert parse_route(route) is None


def test_resolve_headers_uses_wire_names() -> None:
    headers = resolve_headers(
        {
            HeaderField.CONTENT_TYPE: "application/json",
            HeaderField.USER_AGENT: "simple-webservice",
            "X-Trace": "1",
        }
    )

    assert sorted(headers) == [
        ("Content-Type", "application/json"),
        ("User-Agent", "simple-webservice"),
        ("X-Trace", "1"),
    ]


def test_resolve_headers_merges_case_variants() -> None:
    headers = resolve_headers({HeaderField.ACCEPT: "text/plain", "accept": "application/json"})

    assert headers == [("accept", "application/json")]


def test_resolve_headers_empty() -> None:
    assert resolve_headers(None) == []
    assert resolve_headers({}) == []


def test_encode_body() -> None:
    assert encode_body(None) is None
    assert encode_body({"a": 1, "b": [True, None]}) == b'{"a": 1, "b": [true, null]}'


def test_encode_body_rejects_non_json_values() -> None:
    with pytest.raises(TypeError):
        encode_body({"value": {1, 2}})
    with pytest.raises(ValueError):
        encode_body({"value": float("nan")})
