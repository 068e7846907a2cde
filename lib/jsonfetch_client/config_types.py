from __future__ import annotations
from dataclasses import dataclass

from .models import Credentials


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = ""
    debug: bool = False
    token: str | None = None
    token_type: str = "bearer"
    timeout_s: float = 15.0
    credentials: Credentials = Credentials.SAME_ORIGIN
    marker_header: tuple[str, str] = ("X-Requested-With", "fetch")
    timing_history: int = 100

    def default_headers(self) -> dict[str, str]:
        name, value = self.marker_header
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            name: value,
        }
