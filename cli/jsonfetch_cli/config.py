from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from jsonfetch_client.models import Credentials

from . import console

APP_NAME = "jsonfetch"
CONFIG_FILENAME = "config.toml"
ENV_DEBUG = "JSONFETCH_DEBUG"
DEFAULT_TIMEOUT_S = 15.0

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    token: str = ""
    token_type: str = "bearer"


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig = field(default_factory=AuthConfig)
    debug: bool = False
    timeout_s: float = DEFAULT_TIMEOUT_S
    credentials: str = Credentials.SAME_ORIGIN.value


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        base_url="http://127.0.0.1:8000",
        auth=AuthConfig(token="", token_type="bearer"),
        debug=False,
        timeout_s=DEFAULT_TIMEOUT_S,
        credentials=Credentials.SAME_ORIGIN.value,
    )


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def normalize_credentials(raw: str | None) -> str:
    value = (raw or "").strip().lower().replace("_", "-")
    try:
        return Credentials(value).value
    except ValueError:
        return Credentials.SAME_ORIGIN.value


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "yes", "on"}


def _as_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT_S
    return timeout if timeout > 0 else DEFAULT_TIMEOUT_S


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "base_url": cfg.base_url,
            "debug": cfg.debug,
            "timeout_s": cfg.timeout_s,
            "credentials": cfg.credentials,
            "auth": {
                "token": cfg.auth.token,
                "token_type": cfg.auth.token_type,
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune_none(item) for item in value if item is not None]
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    if base_url:
        cfg.base_url = base_url
    cfg.debug = _as_bool(data.get("debug"))
    cfg.timeout_s = _as_timeout(data.get("timeout_s", DEFAULT_TIMEOUT_S))
    cfg.credentials = normalize_credentials(data.get("credentials"))
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth = AuthConfig(
            token=str(auth_raw.get("token") or ""),
            token_type=str(auth_raw.get("token_type") or "bearer"),
        )
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return cfg

    profiles_raw = data.get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        return cfg
    prof = profiles_raw.get(profile)
    if not isinstance(prof, dict):
        return cfg

    base_url = normalize_base_url(str(prof.get("base_url") or cfg.base_url), warn=True)
    auth_raw = prof.get("auth") if isinstance(prof.get("auth"), dict) else {}
    token = str(prof.get("token") or auth_raw.get("token") or cfg.auth.token)
    token_type = str(prof.get("token_type") or auth_raw.get("token_type") or cfg.auth.token_type)
    return AppConfig(
        base_url=base_url or cfg.base_url,
        auth=AuthConfig(token=token, token_type=token_type),
        debug=_as_bool(prof["debug"]) if "debug" in prof else cfg.debug,
        timeout_s=_as_timeout(prof["timeout_s"]) if "timeout_s" in prof else cfg.timeout_s,
        credentials=normalize_credentials(prof["credentials"]) if "credentials" in prof else cfg.credentials,
    )


def resolve_debug(cfg: AppConfig) -> bool:
    env_value = os.getenv(ENV_DEBUG, "").strip()
    if env_value:
        return _as_bool(env_value)
    return cfg.debug


def _stored_profiles(path: str) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return {}
    profiles = data.get("profiles")
    return profiles if isinstance(profiles, dict) else {}


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    data = to_toml(cfg)
    profiles = _stored_profiles(path)
    if profiles:
        data["profiles"] = profiles
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(data).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
