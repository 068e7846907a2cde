from __future__ import annotations

from enum import Enum
from typing import MutableMapping


class AuthorizationType(str, Enum):
    BEARER = "bearer "
    BASIC = "basic "


def add_authorization(
        headers: MutableMapping[str, str],
        auth_type: AuthorizationType | str,
        value: str,
) -> MutableMapping[str, str]:
    prefix = auth_type.value if isinstance(auth_type, AuthorizationType) else str(auth_type)
    headers["Authorization"] = f"{prefix}{value}"
    return headers


def authorization_type(token_type: str | None) -> AuthorizationType:
    if (token_type or "").strip().lower() == "basic":
        return AuthorizationType.BASIC
    return AuthorizationType.BEARER
