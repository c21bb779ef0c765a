import pytest
from pydantic import ValidationError

from router_aggregator.config.settings import Config
from router_aggregator.services.aggregator import (
    AggregatorConfig,
    EndpointDescriptor,
    EndpointFailure,
    EndpointSuccess,
    RequestOptions,
)


class TestAggregatorConfig:
    def test_accepts_original_field_names(self) -> None:
        options = AggregatorConfig.model_validate(
            {
                "routers": [
                    {"id": "router1", "endpoint": "https://api.example.com", "name": "Router 1"},
                    {"id": "router2", "endpoint": "https://b.example.com", "name": "B", "timeout": 250},
                ],
                "defaultTimeout": 1500,
                "maxRetries": 2,
            }
        )

        assert [e.id for e in options.endpoints] == ["router1", "router2"]
        assert options.endpoints[0].display_name == "Router 1"
        assert options.endpoints[0].base_url == "https://api.example.com"
        assert options.endpoints[0].timeout_override_ms is None
        assert options.endpoints[1].timeout_override_ms == 250
        assert options.default_timeout_ms == 1500
        assert options.max_retries == 2

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AGGREGATOR_DEFAULT_TIMEOUT_MS", raising=False)
        monkeypatch.delenv("AGGREGATOR_MAX_RETRIES", raising=False)
        monkeypatch.setattr(
            "router_aggregator.services.aggregator.models.config", Config()
        )

        options = AggregatorConfig(
            endpoints=[EndpointDescriptor(id="a", display_name="a", base_url="http://a")]
        )

        assert options.default_timeout_ms == 5000
        assert options.max_retries == 4

    def test_defaults_follow_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGGREGATOR_DEFAULT_TIMEOUT_MS", "1200")
        monkeypatch.setenv("AGGREGATOR_MAX_RETRIES", "0")
        monkeypatch.setattr(
            "router_aggregator.services.aggregator.models.config", Config()
        )

        options = AggregatorConfig(endpoints=[])

        assert options.default_timeout_ms == 1200
        assert options.max_retries == 0

    def test_no_semantic_validation(self) -> None:
        options = AggregatorConfig(
            endpoints=[
                EndpointDescriptor(id="dup", display_name="dup", base_url="http://a"),
                EndpointDescriptor(id="dup", display_name="dup", base_url="http://b"),
            ],
            default_timeout_ms=0,
        )
        assert len(options.endpoints) == 2
        assert options.default_timeout_ms == 0

    def test_display_name_is_required(self) -> None:
        with pytest.raises(ValidationError):
            EndpointDescriptor.model_validate({"id": "a", "endpoint": "http://a"})

    def test_frozen(self) -> None:
        descriptor = EndpointDescriptor(id="a", display_name="a", base_url="http://a")
        with pytest.raises(ValidationError):
            descriptor.base_url = "http://b"  # type: ignore[misc]


class TestOutcomes:
    def test_tags(self) -> None:
        success = EndpointSuccess(data={"x": 1}, endpoint_id="a", observed_at_ms=1)
        failure = EndpointFailure(error_message="boom", endpoint_id="b", observed_at_ms=2)
        assert success.ok is True
        assert failure.ok is False
        assert not hasattr(success, "error_message")
        assert not hasattr(failure, "data")


class TestRequestOptions:
    def test_default_is_plain_get(self) -> None:
        options = RequestOptions()
        assert options.method == "GET"
        assert options.to_request_kwargs() == {}

    def test_json_takes_precedence_over_content(self) -> None:
        options = RequestOptions(method="POST", json={"a": 1}, content=b"raw")
        kwargs = options.to_request_kwargs()
        assert kwargs == {"json": {"a": 1}}

    def test_headers_and_params(self) -> None:
        options = RequestOptions(headers={"X-Key": "v"}, params={"q": "1"}, content="body")
        assert options.to_request_kwargs() == {
            "headers": {"X-Key": "v"},
            "params": {"q": "1"},
            "content": "body",
        }
