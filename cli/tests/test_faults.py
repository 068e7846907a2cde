from __future__ import annotations

import httpx
import pytest

from jsonfetch_client.errors import ErrorKind, FetchError
from jsonfetch_client.faults import handle_transport_fault


def test_raw_fault_becomes_generic_error() -> None:
    fault = httpx.ConnectError("connection refused")
    with pytest.raises(FetchError) as exc:
        handle_transport_fault(fault)
    assert exc.value.kind is ErrorKind.GENERIC
    assert exc.value.body is None
    assert exc.value.headers is None
    assert exc.value.status_code is None
    assert exc.value.cause is fault
    assert exc.value.__cause__ is fault


def test_classified_error_is_not_wrapped_again() -> None:
    original = FetchError(ErrorKind.NOT_FOUND, {"reason": "missing"}, {}, status_code=404)
    with pytest.raises(FetchError) as exc:
        handle_transport_fault(original)
    assert exc.value is original


def test_unexpected_exception_is_wrapped() -> None:
    with pytest.raises(FetchError) as exc:
        handle_transport_fault(RuntimeError("boom"))
    assert exc.value.kind is ErrorKind.GENERIC
    assert "boom" in str(exc.value)
