from __future__ import annotations

import os

import typer

from .. import console
from ..config import (
    config_path,
    default_config,
    load_config,
    normalize_base_url,
    normalize_credentials,
    resolve_debug,
    save_config,
)

app = typer.Typer(help="Manage local CLI settings (~/.config/jsonfetch/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="API base URL",
            help="API base URL like http://127.0.0.1:8000",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.fail("Base URL cannot be empty.", code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    token_state = "(set)" if (cfg.auth.token or "").strip() else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url} debug={resolve_debug(cfg)} timeout_s={cfg.timeout_s} "
        f"credentials={cfg.credentials} token={token_state} token_type={cfg.auth.token_type}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, debug, timeout_s, credentials)."),
):
    cfg = load_config()
    k = key.strip().lower()
    values = {
        "base_url": cfg.base_url,
        "debug": str(resolve_debug(cfg)).lower(),
        "timeout_s": str(cfg.timeout_s),
        "credentials": cfg.credentials,
    }
    if k not in values:
        console.fail(f"Unknown setting: {key}", code=2)
    console.console.print(values[k])


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        token: str | None = typer.Option(None, "--token", help="Set the Authorization token."),
        token_type: str | None = typer.Option(None, "--token-type", help="bearer or basic."),
        debug: bool | None = typer.Option(None, "--debug/--no-debug", help="Keep error details for generic errors."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
        credentials: str | None = typer.Option(None, "--credentials", help="same-origin, include or omit."),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if token is not None:
        cfg.auth.token = token.strip()
    if token_type is not None:
        if token_type.strip().lower() not in {"bearer", "basic"}:
            console.fail(f"Unknown token type: {token_type}", code=2)
        cfg.auth.token_type = token_type.strip().lower()
    if debug is not None:
        cfg.debug = debug
    if timeout_s is not None:
        if timeout_s <= 0:
            console.fail("Timeout must be positive.", code=2)
        cfg.timeout_s = timeout_s
    if credentials is not None:
        cfg.credentials = normalize_credentials(credentials)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
