import httpx

from router_aggregator.core.error_utils import extract_error_message, format_http_error
from router_aggregator.core.exceptions import RequestTimeoutError, ResponseDecodeError


class TestExtractErrorMessage:
    def test_uses_exception_text(self) -> None:
        assert extract_error_message(ValueError("bad value")) == "bad value"

    def test_prefers_message_attribute(self) -> None:
        error = RequestTimeoutError(10, endpoint_id="a")
        assert extract_error_message(error) == "Request aborted: timed out after 10ms"

    def test_empty_exception_falls_back(self) -> None:
        assert extract_error_message(httpx.ReadTimeout("")) == "Request failed"
        assert extract_error_message(RuntimeError(), "Unknown error") == "Unknown error"


class TestFormatHttpError:
    def test_with_reason(self) -> None:
        assert format_http_error(404, "Not Found") == "HTTP 404: Not Found"

    def test_without_reason(self) -> None:
        assert format_http_error(599, "") == "HTTP 599"
        assert format_http_error(599) == "HTTP 599"


def test_decode_error_keeps_detail() -> None:
    error = ResponseDecodeError("missing field", endpoint_id="relay")
    assert error.message == "Response decode failed: missing field"
    assert error.detail == "missing field"
    assert error.endpoint_id == "relay"
