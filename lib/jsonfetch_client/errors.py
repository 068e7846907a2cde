from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    GENERIC = "generic"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


_KIND_BY_STATUS = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
}


def error_kind_for_status(status_code: int | None) -> ErrorKind:
    if status_code is None:
        return ErrorKind.GENERIC
    return _KIND_BY_STATUS.get(int(status_code), ErrorKind.GENERIC)


class FetchError(Exception):
    """Classified failure of one request attempt.

    ``kind`` is fixed at construction. ``body`` and ``headers`` carry whatever
    the server sent back; both are None for transport faults, where ``cause``
    holds the original exception instead.
    """

    def __init__(
            self,
            kind: ErrorKind,
            body: Any = None,
            headers: dict[str, str] | None = None,
            *,
            status_code: int | None = None,
            cause: BaseException | None = None,
    ):
        super().__init__(_describe(kind, status_code, cause))
        self._kind = ErrorKind(kind)
        self._body = body
        self._headers = dict(headers) if headers is not None else None
        self._status_code = status_code
        self._cause = cause

    @classmethod
    def from_status(cls, status_code: int, body: Any, headers: dict[str, str] | None) -> "FetchError":
        return cls(error_kind_for_status(status_code), body, headers, status_code=status_code)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def body(self) -> Any:
        return self._body

    @property
    def headers(self) -> dict[str, str] | None:
        return dict(self._headers) if self._headers is not None else None

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def is_generic(self) -> bool:
        return self._kind is ErrorKind.GENERIC

    def with_body(self, body: Any) -> "FetchError":
        """Return a copy of this error carrying a different body."""
        clone = FetchError(
            self._kind,
            body,
            self._headers,
            status_code=self._status_code,
            cause=self._cause,
        )
        clone.__cause__ = self.__cause__
        return clone

    def __repr__(self) -> str:
        return (
            f"FetchError(kind={self._kind.value!r}, status_code={self._status_code!r}, "
            f"body={self._body!r}, headers={self._headers!r}, cause={self._cause!r})"
        )


def _describe(kind: ErrorKind, status_code: int | None, cause: BaseException | None) -> str:
    label = ErrorKind(kind).value
    if status_code is not None:
        return f"{label} (HTTP {status_code})"
    if cause is not None:
        return f"{label}: {type(cause).__name__}: {cause}"
    return label
