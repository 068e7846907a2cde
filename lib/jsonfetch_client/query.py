from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _format(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def build_query_params(query: Mapping[str, Any], *, drop_empty: bool = True) -> str:
    """Encode ``query`` as an ``application/x-www-form-urlencoded`` string.

    Scalars come first, in mapping order. List or tuple values are appended
    afterwards as repeated keys; an empty list contributes nothing. With
    ``drop_empty`` keys whose value is None or "" are left out.
    """
    pairs: list[tuple[str, str]] = []
    repeated: list[tuple[str, list]] = []
    for key, value in query.items():
        if drop_empty and _is_empty(value):
            continue
        if isinstance(value, (list, tuple)):
            repeated.append((str(key), list(value)))
            continue
        pairs.append((str(key), _format(value)))

    for key, values in repeated:
        for item in values:
            pairs.append((key, _format(item)))
    return urlencode(pairs)


def append_query(url: str, query: Mapping[str, Any] | None) -> str:
    if not query:
        return url
    return url + "?" + build_query_params(query, drop_empty=True)
