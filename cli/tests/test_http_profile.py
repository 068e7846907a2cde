from __future__ import annotations

from jsonfetch_client import Credentials
from jsonfetch_cli import config
from jsonfetch_cli.http import make_client


def test_make_client_uses_profile_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    monkeypatch.delenv(config.ENV_DEBUG, raising=False)
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(
        '\n'.join(
            [
                'base_url = "http://default.test"',
                "",
                "[auth]",
                'token = "default-token"',
                "",
                "[profiles.dev]",
                'base_url = "http://dev.test"',
                'token = "dev-token"',
                "debug = true",
                "",
                "[profiles.prod]",
                'base_url = "http://prod.test"',
                'token = "prod-token"',
                'credentials = "include"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.load_config()
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg, *, on_unauthorized=None):
            captured["cfg"] = client_cfg
            captured["on_unauthorized"] = on_unauthorized

    monkeypatch.setattr("jsonfetch_cli.http.FetchClient", _FakeClient)

    make_client(cfg, profile="prod", base_url_override=None)
    assert captured["cfg"].base_url == "http://prod.test"
    assert captured["cfg"].token == "prod-token"
    assert captured["cfg"].credentials is Credentials.INCLUDE
    assert captured["cfg"].debug is False
    assert captured["on_unauthorized"] is not None

    make_client(cfg, profile="dev", base_url_override=None)
    assert captured["cfg"].token == "dev-token"
    assert captured["cfg"].debug is True


def test_make_client_normalizes_base_url_override(monkeypatch) -> None:
    cfg = config.default_config()
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg, *, on_unauthorized=None):
            captured["base_url"] = client_cfg.base_url
            captured["token"] = client_cfg.token

    monkeypatch.setattr("jsonfetch_cli.http.FetchClient", _FakeClient)

    make_client(cfg, profile=None, base_url_override="example.com/")

    assert captured["base_url"] == "https://example.com"
    assert captured["token"] is None
