import pytest

from router_aggregator.config.settings import Config


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "AGGREGATOR_DEFAULT_TIMEOUT_MS",
        "AGGREGATOR_MAX_RETRIES",
        "HTTP_MAX_CONNECTIONS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = Config()

    assert cfg.default_timeout_ms == 5000
    assert cfg.max_retries == 4
    assert cfg.http_max_connections == 100
    assert cfg.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AGGREGATOR_DEFAULT_TIMEOUT_MS", "750")
    monkeypatch.setenv("HTTP_KEEPALIVE_EXPIRY", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    cfg = Config()

    assert cfg.default_timeout_ms == 750
    assert cfg.http_keepalive_expiry == 2.5
    assert cfg.log_level == "DEBUG"


def test_invalid_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AGGREGATOR_MAX_RETRIES", "many")
    monkeypatch.setenv("HTTP_CONNECT_TIMEOUT", "")

    cfg = Config()

    assert cfg.max_retries == 4
    assert cfg.http_connect_timeout == 10.0
    assert cfg.to_dict()["max_retries"] == 4
