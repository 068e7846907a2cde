from __future__ import annotations

import json

import httpx
import pytest
import typer
from typer.testing import CliRunner

from jsonfetch_client import ClientConfig, FetchClient
from jsonfetch_cli import config, main
from jsonfetch_cli.commands import request_cmd


def _install_client(monkeypatch, handler, **cfg_kwargs) -> tuple[list[httpx.Request], list[str]]:
    seen: list[httpx.Request] = []
    hints: list[str] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    def _make_client(*_args, **_kwargs) -> FetchClient:
        return FetchClient(
            ClientConfig(base_url="http://api.test", **cfg_kwargs),
            on_unauthorized=lambda: hints.append("login"),
            http_transport=httpx.MockTransport(_record),
        )

    monkeypatch.setattr(request_cmd, "load_config", config.default_config)
    monkeypatch.setattr(request_cmd, "make_client", _make_client)
    return seen, hints


def test_get_prints_body(monkeypatch) -> None:
    seen, _ = _install_client(monkeypatch, lambda request: httpx.Response(200, json={"id": 7}))

    result = CliRunner().invoke(main.app, ["get", "/items", "-p", "tags=a", "-p", "tags=b", "-p", "name="])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"id": 7}
    assert seen[0].url.params.get_list("tags") == ["a", "b"]
    assert "name" not in seen[0].url.params


def test_get_not_found_exits_with_error(monkeypatch) -> None:
    _install_client(monkeypatch, lambda request: httpx.Response(404, json={"reason": "missing"}))

    result = CliRunner().invoke(main.app, ["get", "/items/9"])

    assert result.exit_code == 1
    assert "not_found" in result.output
    assert "missing" in result.output


def test_post_sends_json_body(monkeypatch) -> None:
    seen, _ = _install_client(monkeypatch, lambda request: httpx.Response(201, json={"id": 7}))

    result = CliRunner().invoke(main.app, ["post", "/items", "--data", '{"name": "x"}'])

    assert result.exit_code == 0
    assert json.loads(seen[0].content) == {"name": "x"}
    assert json.loads(result.output) == {"id": 7}


def test_server_error_is_redacted(monkeypatch) -> None:
    _install_client(monkeypatch, lambda request: httpx.Response(500, json={"trace": "secret"}))

    result = CliRunner().invoke(main.app, ["put", "/items/1", "--data", "{}"])

    assert result.exit_code == 1
    assert "Technical error" in result.output


def test_unauthorized_runs_hint(monkeypatch) -> None:
    _, hints = _install_client(monkeypatch, lambda request: httpx.Response(401, json={}))

    result = CliRunner().invoke(main.app, ["delete", "/items/1"])

    assert result.exit_code == 1
    assert hints == ["login"]


def test_extra_headers_extend_default_set(monkeypatch) -> None:
    seen, _ = _install_client(monkeypatch, lambda request: httpx.Response(200, json={}))

    result = CliRunner().invoke(main.app, ["get", "/items", "-H", "X-Tenant: acme"])

    assert result.exit_code == 0
    assert seen[0].headers["X-Tenant"] == "acme"
    assert seen[0].headers["Accept"] == "application/json"


def test_timing_table_printed(monkeypatch) -> None:
    _install_client(monkeypatch, lambda request: httpx.Response(200, json={"ok": True}))

    result = CliRunner().invoke(main.app, ["get", "/items", "--timing"])

    assert result.exit_code == 0
    assert "Request timings" in result.output


def test_parse_params_groups_repeated_keys() -> None:
    assert request_cmd.parse_params(["a=1", "b=2", "a=3", "c="]) == {"a": ["1", "3"], "b": "2", "c": ""}


def test_parse_params_rejects_missing_separator() -> None:
    with pytest.raises(typer.BadParameter):
        request_cmd.parse_params(["oops"])


def test_parse_data_rejects_invalid_json() -> None:
    with pytest.raises(typer.BadParameter):
        request_cmd.parse_data("{not json")


def test_parse_headers() -> None:
    assert request_cmd.parse_headers(["Accept: text/plain", "X-A:1"]) == {"Accept": "text/plain", "X-A": "1"}
