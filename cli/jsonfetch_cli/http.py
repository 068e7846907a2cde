from __future__ import annotations

from typing import Callable

from jsonfetch_client import ClientConfig, Credentials, FetchClient

from . import console
from .config import AppConfig, apply_profile, normalize_base_url, resolve_debug


def unauthorized_hint() -> None:
    console.warn("Not authenticated. Set a token with `jsonfetch settings set --token ...` and retry.")


def make_client(
        cfg: AppConfig,
        *,
        profile: str | None,
        base_url_override: str | None,
        on_unauthorized: Callable[[], None] | None = unauthorized_hint,
) -> FetchClient:
    effective_cfg = apply_profile(cfg, profile)
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url, warn=True)
    token = effective_cfg.auth.token or None

    return FetchClient(
        ClientConfig(
            base_url=base_url,
            debug=resolve_debug(effective_cfg),
            token=token,
            token_type=effective_cfg.auth.token_type,
            timeout_s=effective_cfg.timeout_s,
            credentials=Credentials(effective_cfg.credentials),
        ),
        on_unauthorized=on_unauthorized,
    )
