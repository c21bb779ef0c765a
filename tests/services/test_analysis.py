from router_aggregator.services.aggregator import (
    EndpointFailure,
    EndpointSuccess,
    calculate_success_rate,
    get_fastest_response,
    get_latest_response,
    group_by_endpoint,
)


def _ok(endpoint_id: str, at: int, data: object = None) -> EndpointSuccess:
    return EndpointSuccess(data=data, endpoint_id=endpoint_id, observed_at_ms=at)


def _fail(endpoint_id: str, at: int) -> EndpointFailure:
    return EndpointFailure(error_message="HTTP 500", endpoint_id=endpoint_id, observed_at_ms=at)


class TestFastestResponse:
    def test_picks_earliest_success(self) -> None:
        outcomes = [_ok("a", 300), _fail("b", 50), _ok("c", 120)]
        fastest = get_fastest_response(outcomes)
        assert fastest is not None
        assert fastest.endpoint_id == "c"

    def test_tie_keeps_first(self) -> None:
        outcomes = [_ok("a", 100), _ok("b", 100)]
        fastest = get_fastest_response(outcomes)
        assert fastest is not None
        assert fastest.endpoint_id == "a"

    def test_no_success_returns_none(self) -> None:
        assert get_fastest_response([_fail("a", 1)]) is None
        assert get_fastest_response([]) is None


class TestLatestResponse:
    def test_includes_failures(self) -> None:
        outcomes = [_ok("a", 100), _fail("b", 400), _ok("c", 200)]
        latest = get_latest_response(outcomes)
        assert latest is not None
        assert latest.endpoint_id == "b"

    def test_empty_returns_none(self) -> None:
        assert get_latest_response([]) is None


class TestSuccessRate:
    def test_percentage(self) -> None:
        outcomes = [_ok("a", 1), _fail("b", 1), _ok("c", 1), _fail("d", 1)]
        assert calculate_success_rate(outcomes) == 50.0

    def test_empty_is_zero(self) -> None:
        assert calculate_success_rate([]) == 0.0


def test_group_by_endpoint_keeps_duplicates_together() -> None:
    first = _ok("relay", 1)
    second = _fail("across", 2)
    third = _fail("relay", 3)

    groups = group_by_endpoint([first, second, third])

    assert list(groups) == ["relay", "across"]
    assert groups["relay"] == [first, third]
    assert groups["across"] == [second]
