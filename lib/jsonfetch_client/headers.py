from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def normalize_headers(collection: Any) -> dict[str, str]:
    """Flatten a transport header collection into a plain dict.

    Accepts anything exposing ``items()`` (``httpx.Headers``, dicts) or an
    iterable of ``(name, value)`` pairs. Enumeration order is kept, names are
    taken exactly as the collection yields them and a repeated name keeps
    the last value.
    """
    if collection is None:
        return {}
    if isinstance(collection, Mapping) or hasattr(collection, "items"):
        pairs: Iterable = collection.items()
    else:
        pairs = collection

    out: dict[str, str] = {}
    for key, value in pairs:
        out[_text(key)] = _text(value)
    return out


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)
