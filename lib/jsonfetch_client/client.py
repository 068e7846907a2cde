from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import httpx

from .classifier import classify
from .codec import encode
from .config_types import ClientConfig
from .errors import FetchError
from .faults import handle_transport_fault
from .interceptor import ErrorInterceptor
from .models import FetchResponse, Method, Result
from .query import append_query
from .transport import Transport, timing_as_dict

logger = logging.getLogger(__name__)


class FetchClient:
    """JSON backend access with uniform failure handling.

    ``get`` returns the decoded body or None; ``post``, ``put`` and ``delete``
    return a :class:`Result`. HTTP errors and transport faults never escape
    these methods, they go through the :class:`ErrorInterceptor` instead.
    """

    def __init__(
            self,
            cfg: ClientConfig,
            *,
            on_unauthorized: Callable[[], None] | None = None,
            transport: Transport | None = None,
            http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._cfg = cfg
        self._t = transport or Transport(cfg, transport=http_transport)
        self._interceptor = ErrorInterceptor(debug=cfg.debug, on_unauthorized=on_unauthorized)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> "FetchClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # --- pipeline ---
    async def _send(
            self,
            method: Method,
            url: str,
            *,
            body: Any = None,
            headers: Mapping[str, str] | None = None,
    ) -> FetchResponse:
        request_headers = dict(headers) if headers is not None else self._cfg.default_headers()
        try:
            raw = await self._t.send(
                method.value,
                url,
                headers=request_headers,
                body=encode(body),
                credentials=self._cfg.credentials,
            )
        except Exception as exc:
            handle_transport_fault(exc)
        return classify(raw.status_code, raw.content, raw.headers)

    async def _query(
            self,
            url: str,
            query: Mapping[str, Any] | None,
            headers: Mapping[str, str] | None,
    ) -> FetchResponse:
        return await self._send(Method.GET, append_query(url, query), headers=headers)

    async def _command(
            self,
            method: Method,
            url: str,
            body: Any,
            headers: Mapping[str, str] | None,
    ) -> Result[Any]:
        try:
            response = await self._send(method, url, body=body, headers=headers)
        except FetchError as e:
            return self._interceptor.intercept(e)
        return Result.ok(response.body)

    # --- verbs ---
    async def get_result(
            self,
            url: str,
            query: Mapping[str, Any] | None = None,
            headers: Mapping[str, str] | None = None,
    ) -> Result[Any]:
        try:
            response = await self._query(url, query, headers)
        except FetchError as e:
            return self._interceptor.intercept(e)
        return Result.ok(response.body)

    async def get(
            self,
            url: str,
            query: Mapping[str, Any] | None = None,
            headers: Mapping[str, str] | None = None,
    ) -> Any | None:
        result = await self.get_result(url, query, headers)
        return result.payload if result.succeeded else None

    async def post(self, url: str, body: Any = None, headers: Mapping[str, str] | None = None) -> Result[Any]:
        return await self._command(Method.POST, url, body, headers)

    async def put(self, url: str, body: Any = None, headers: Mapping[str, str] | None = None) -> Result[Any]:
        return await self._command(Method.PUT, url, body, headers)

    async def delete(self, url: str, body: Any = None, headers: Mapping[str, str] | None = None) -> Result[Any]:
        return await self._command(Method.DELETE, url, body, headers)

    def performance_info(self) -> list[dict[str, Any]]:
        entries = [timing_as_dict(entry) for entry in self._t.timings()]
        logger.info("request timings: %s", entries)
        return entries
