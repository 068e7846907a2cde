from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

BODY_TEXT_KEY = "bodyText"


@dataclass(frozen=True)
class RawBody:
    """Pre-serialized payload (multipart form, file contents, ...) sent as is.

    ``content_type`` replaces the JSON content type for this request when set.
    """

    content: bytes
    content_type: str | None = None


WireBody = Union[str, bytes, RawBody, None]


def encode(payload: Any) -> WireBody:
    if payload is None:
        return None
    if isinstance(payload, RawBody):
        return payload
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    return json.dumps(payload, ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def decode(raw: str | bytes | None) -> Any:
    """Parse a response body, falling back to ``{"bodyText": raw}``.

    An empty body decodes to ``{}``. Never raises.
    """
    if raw is None:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        text = bytes(raw).decode("utf-8", errors="replace")
    else:
        text = raw
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # empty or invalid json
        if text:
            return {BODY_TEXT_KEY: text}
        return {}
