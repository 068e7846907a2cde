from __future__ import annotations

import logging
from typing import NoReturn

from .errors import ErrorKind, FetchError

logger = logging.getLogger(__name__)


def handle_transport_fault(exc: BaseException) -> NoReturn:
    """Re-raise ``exc`` inside the FetchError taxonomy.

    Errors that were already classified pass through untouched; anything else
    (server offline, DNS failure, unexpected exception while sending) becomes
    a generic FetchError without body or headers.
    """
    if isinstance(exc, FetchError):
        raise exc
    logger.debug("transport fault: %r", exc)
    raise FetchError(ErrorKind.GENERIC, cause=exc) from exc
