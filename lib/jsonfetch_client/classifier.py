from __future__ import annotations

from typing import Any

from .codec import decode
from .errors import FetchError
from .headers import normalize_headers
from .models import FetchResponse

STATUS_OK = 200
STATUS_LAST_SUCCESS = 299


def is_error_status(status_code: int) -> bool:
    # 1xx and 3xx count as errors too, only 200..299 is success
    return status_code < STATUS_OK or status_code > STATUS_LAST_SUCCESS


def classify(status_code: int, raw_body: str | bytes | None, raw_headers: Any) -> FetchResponse:
    """Turn a completed exchange into a FetchResponse or raise a FetchError.

    The body must already be fully read: error variants carry it.
    """
    headers = normalize_headers(raw_headers)
    body = decode(raw_body)
    if is_error_status(status_code):
        raise FetchError.from_status(status_code, body, headers)
    return FetchResponse(body=body, headers=headers)
