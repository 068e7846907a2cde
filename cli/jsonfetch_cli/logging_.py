from __future__ import annotations

import logging

CLIENT_LOGGER = "jsonfetch_client"


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # per-exchange lines from the transport only show up with -v
    logging.getLogger(CLIENT_LOGGER).setLevel(level)

    # httpx is noisy at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.DEBUG if verbose else logging.WARNING)
