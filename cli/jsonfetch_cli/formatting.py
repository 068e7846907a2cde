from __future__ import annotations

import json
from typing import Any, Iterable

from rich.table import Table

from jsonfetch_client import FetchError


def format_ms(seconds: float | None) -> str:
    if seconds is None:
        return "-"
    return f"{seconds * 1000:.1f}ms"


def format_size(size: int | None) -> str:
    if size is None:
        return "-"
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}KiB"
    return f"{size / (1024 * 1024):.1f}MiB"


def format_error(error: FetchError) -> str:
    head = error.kind.value
    if error.status_code is not None:
        head = f"{head} (HTTP {error.status_code})"
    elif error.cause is not None:
        head = f"{head}: {error.cause}"
    if error.body is None:
        return head
    if isinstance(error.body, str):
        return f"{head}: {error.body}"
    return f"{head}: {json.dumps(error.body, ensure_ascii=False)}"


def timing_table(entries: Iterable[dict[str, Any]]) -> Table:
    table = Table(title="Request timings")
    table.add_column("URL")
    table.add_column("Size", justify="right")
    table.add_column("TTFB", justify="right")
    table.add_column("Duration", justify="right")
    for entry in entries:
        table.add_row(
            str(entry.get("name") or "-"),
            format_size(entry.get("transferSize")),
            format_ms(entry.get("ttfb")),
            format_ms(entry.get("duration")),
        )
    return table
