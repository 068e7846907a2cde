from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import FetchError

T = TypeVar("T")


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Credentials(str, Enum):
    SAME_ORIGIN = "same-origin"
    INCLUDE = "include"
    OMIT = "omit"


@dataclass(frozen=True)
class RawResponse:
    """What the transport hands back: status, header collection, fully read body."""

    status_code: int
    headers: Any
    content: bytes = b""


@dataclass(frozen=True)
class FetchResponse:
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome envelope returned by the mutating verbs.

    ``payload`` is only meaningful when ``succeeded`` is true, and ``error`` is
    set exactly when it is false.
    """

    succeeded: bool
    payload: T | None = None
    error: FetchError | None = None

    def __post_init__(self) -> None:
        if self.succeeded and self.error is not None:
            raise ValueError("succeeded result cannot carry an error")
        if not self.succeeded and self.error is None:
            raise ValueError("failed result must carry an error")
        if not self.succeeded and self.payload is not None:
            raise ValueError("failed result cannot carry a payload")

    @classmethod
    def ok(cls, payload: T | None = None) -> "Result[T]":
        return cls(True, payload, None)

    @classmethod
    def failed(cls, error: FetchError) -> "Result[T]":
        return cls(False, None, error)
