from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any

import httpx

from .auth import add_authorization, authorization_type
from .codec import RawBody, WireBody
from .config_types import ClientConfig
from .models import Credentials, RawResponse

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class TimingEntry:
    name: str
    start_time: float
    transfer_size: int
    duration: float
    ttfb: float


def _origin(url: httpx.URL) -> tuple[str, str, int | None]:
    scheme = url.scheme.lower()
    return scheme, url.host.lower(), url.port or _DEFAULT_PORTS.get(scheme)


def _content(body: WireBody, headers: dict[str, str]) -> tuple[bytes | None, dict[str, str]]:
    if body is None:
        return None, headers
    if isinstance(body, RawBody):
        if body.content_type:
            headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}
            headers["Content-Type"] = body.content_type
        return body.content, headers
    if isinstance(body, str):
        return body.encode("utf-8"), headers
    return bytes(body), headers


class Transport:
    """One HTTP exchange per ``send`` call on top of ``httpx.AsyncClient``.

    The body is read completely before ``send`` returns. Exceptions raised by
    httpx are not translated here.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        base_url = (cfg.base_url or "").rstrip("/")
        self._origin = _origin(httpx.URL(base_url)) if base_url else None
        self._timings: deque[TimingEntry] = deque(maxlen=max(1, int(cfg.timing_history)))
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=cfg.timeout_s,
            follow_redirects=True,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    def timings(self) -> list[TimingEntry]:
        return list(self._timings)

    def _credentials_allowed(self, url: httpx.URL, credentials: Credentials) -> bool:
        if credentials is Credentials.INCLUDE:
            return True
        if credentials is Credentials.OMIT:
            return False
        return self._origin is not None and _origin(url) == self._origin

    def _apply_credentials(self, request: httpx.Request, credentials: Credentials) -> None:
        if not self._credentials_allowed(request.url, credentials):
            request.headers.pop("Cookie", None)
            return
        if self._cfg.token and "Authorization" not in request.headers:
            add_authorization(request.headers, authorization_type(self._cfg.token_type), self._cfg.token)

    async def send(
            self,
            method: str,
            url: str,
            *,
            headers: dict[str, str],
            body: WireBody = None,
            credentials: Credentials = Credentials.SAME_ORIGIN,
    ) -> RawResponse:
        content, headers = _content(body, dict(headers))
        request = self._client.build_request(method, url, headers=headers, content=content)
        self._apply_credentials(request, Credentials(credentials))

        started = time.perf_counter()
        response = await self._client.send(request, stream=True)
        ttfb = time.perf_counter() - started
        try:
            data = await response.aread()
        finally:
            await response.aclose()
        duration = time.perf_counter() - started

        self._timings.append(
            TimingEntry(
                name=str(request.url),
                start_time=started,
                transfer_size=len(data),
                duration=duration,
                ttfb=ttfb,
            )
        )
        logger.debug("%s %s -> %s (%.1f ms)", method, request.url, response.status_code, duration * 1000)
        return RawResponse(status_code=response.status_code, headers=response.headers, content=data)


def timing_as_dict(entry: TimingEntry) -> dict[str, Any]:
    return {
        "name": entry.name,
        "startTime": entry.start_time,
        "transferSize": entry.transfer_size,
        "duration": entry.duration,
        "ttfb": entry.ttfb,
    }
