from __future__ import annotations

import httpx

from jsonfetch_client.headers import normalize_headers


def test_normalize_plain_mapping_keeps_order_and_case() -> None:
    out = normalize_headers({"X-Trace": "abc", "content-type": "application/json"})
    assert list(out.items()) == [("X-Trace", "abc"), ("content-type", "application/json")]


def test_normalize_httpx_headers_follows_transport_names() -> None:
    headers = httpx.Headers([("X-Trace", "abc"), ("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
    out = normalize_headers(headers)
    assert out == {"x-trace": "abc", "set-cookie": "a=1, b=2"}


def test_normalize_pairs_last_value_wins() -> None:
    out = normalize_headers([("A", "1"), (b"B", b"2"), ("A", "3")])
    assert out == {"A": "3", "B": "2"}


def test_normalize_none_is_empty() -> None:
    assert normalize_headers(None) == {}
