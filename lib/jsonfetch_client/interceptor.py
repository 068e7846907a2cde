from __future__ import annotations

import logging
from typing import Callable

from .errors import ErrorKind, FetchError
from .models import Result

logger = logging.getLogger(__name__)

REDACTED_BODY = "Technical error"


class ErrorInterceptor:
    """Side effects and envelope wrapping applied to every failed request.

    ``on_unauthorized`` is called once per UNAUTHORIZED error; the embedding
    application decides what "go back to the start" means. Outside debug
    mode generic errors lose their body so technical details never reach end
    users. Named kinds keep it: callers read validation messages from it.
    """

    def __init__(
            self,
            *,
            debug: bool = False,
            on_unauthorized: Callable[[], None] | None = None,
            placeholder: str = REDACTED_BODY,
    ):
        self._debug = bool(debug)
        self._on_unauthorized = on_unauthorized
        self._placeholder = placeholder

    def intercept(self, error: FetchError) -> Result[None]:
        logger.error("request failed: %r", error)

        if error.kind is ErrorKind.UNAUTHORIZED and self._on_unauthorized is not None:
            try:
                self._on_unauthorized()
            except Exception:
                logger.exception("on_unauthorized callback failed")

        if not self._debug and error.is_generic:
            error = error.with_body(self._placeholder)

        return Result.failed(error)
