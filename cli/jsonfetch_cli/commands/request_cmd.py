from __future__ import annotations

import asyncio
import json
from typing import Any

import typer

from jsonfetch_client import FetchClient, Method, Result

from .. import console
from ..config import load_config
from ..formatting import format_error, timing_table
from ..http import make_client


def parse_params(values: list[str] | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {raw!r}", param_hint="--param")
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]
    return params


def parse_headers(values: list[str] | None) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in values or []:
        name, sep, value = raw.partition(":")
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(f"expected Name: value, got {raw!r}", param_hint="--header")
        headers[name] = value.strip()
    return headers


def parse_data(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--data") from e


def _header_set(client: FetchClient, extra: dict[str, str]) -> dict[str, str] | None:
    if not extra:
        return None
    headers = client.config.default_headers()
    headers.update(extra)
    return headers


async def _perform(
        client: FetchClient,
        method: Method,
        url: str,
        *,
        params: dict[str, Any],
        data: Any,
        extra_headers: dict[str, str],
        timing: bool,
) -> tuple[Result[Any], list[dict[str, Any]]]:
    async with client:
        headers = _header_set(client, extra_headers)
        if method is Method.GET:
            result = await client.get_result(url, params or None, headers)
        elif method is Method.POST:
            result = await client.post(url, data, headers)
        elif method is Method.PUT:
            result = await client.put(url, data, headers)
        else:
            result = await client.delete(url, data, headers)
        timings = client.performance_info() if timing else []
    return result, timings


def run_request(
        method: Method,
        url: str,
        *,
        params: list[str] | None = None,
        data: str | None = None,
        header: list[str] | None = None,
        timing: bool = False,
        profile: str | None = None,
        base_url: str | None = None,
) -> None:
    query = parse_params(params)
    body = parse_data(data)
    extra_headers = parse_headers(header)

    cfg = load_config()
    client = make_client(cfg, profile=profile, base_url_override=base_url)
    result, timings = asyncio.run(
        _perform(
            client,
            method,
            url,
            params=query,
            data=body,
            extra_headers=extra_headers,
            timing=timing,
        )
    )

    if timings:
        console.print(timing_table(timings))
    if not result.succeeded:
        console.fail(format_error(result.error))
    console.print_json(result.payload)


_PROFILE = typer.Option(None, "--profile", help="Config profile to use.")
_BASE_URL = typer.Option(None, "--base-url", help="Override base URL.")
_HEADER = typer.Option(None, "--header", "-H", help="Extra header 'Name: value' (repeatable).")
_TIMING = typer.Option(False, "--timing", help="Show request timings.")
_DATA = typer.Option(None, "--data", "-d", help="JSON request body.")


def get_cmd(
        url: str = typer.Argument(..., help="Path relative to base URL, or absolute URL."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Query parameter key=value (repeatable)."),
        header: list[str] | None = _HEADER,
        timing: bool = _TIMING,
        profile: str | None = _PROFILE,
        base_url: str | None = _BASE_URL,
) -> None:
    run_request(Method.GET, url, params=param, header=header, timing=timing, profile=profile, base_url=base_url)


def post_cmd(
        url: str = typer.Argument(..., help="Path relative to base URL, or absolute URL."),
        data: str | None = _DATA,
        header: list[str] | None = _HEADER,
        timing: bool = _TIMING,
        profile: str | None = _PROFILE,
        base_url: str | None = _BASE_URL,
) -> None:
    run_request(Method.POST, url, data=data, header=header, timing=timing, profile=profile, base_url=base_url)


def put_cmd(
        url: str = typer.Argument(..., help="Path relative to base URL, or absolute URL."),
        data: str | None = _DATA,
        header: list[str] | None = _HEADER,
        timing: bool = _TIMING,
        profile: str | None = _PROFILE,
        base_url: str | None = _BASE_URL,
) -> None:
    run_request(Method.PUT, url, data=data, header=header, timing=timing, profile=profile, base_url=base_url)


def delete_cmd(
        url: str = typer.Argument(..., help="Path relative to base URL, or absolute URL."),
        data: str | None = _DATA,
        header: list[str] | None = _HEADER,
        timing: bool = _TIMING,
        profile: str | None = _PROFILE,
        base_url: str | None = _BASE_URL,
) -> None:
    run_request(Method.DELETE, url, data=data, header=header, timing=timing, profile=profile, base_url=base_url)
