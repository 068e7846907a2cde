from jsonfetch_client import ErrorKind, FetchError
from jsonfetch_cli.formatting import format_error, format_ms, format_size, timing_table


def test_format_ms() -> None:
    assert format_ms(None) == "-"
    assert format_ms(0.0123) == "12.3ms"


def test_format_size() -> None:
    assert format_size(None) == "-"
    assert format_size(512) == "512B"
    assert format_size(2048) == "2.0KiB"
    assert format_size(3 * 1024 * 1024) == "3.0MiB"


def test_format_error_with_status_and_body() -> None:
    error = FetchError(ErrorKind.NOT_FOUND, {"reason": "missing"}, {}, status_code=404)
    assert format_error(error) == 'not_found (HTTP 404): {"reason": "missing"}'


def test_format_error_redacted_transport_fault() -> None:
    error = FetchError(ErrorKind.GENERIC, cause=ConnectionError("refused")).with_body("Technical error")
    assert format_error(error) == "generic: refused: Technical error"


def test_timing_table_rows() -> None:
    table = timing_table([{"name": "https://api.test/items", "transferSize": 10, "ttfb": 0.001, "duration": 0.002}])
    assert table.row_count == 1
